from .config import Settings, get_settings, reset_settings
from .exceptions import (
    UserHobbiesError,
    BadRequestError,
    NotFoundError,
    InternalFaultError,
)
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "UserHobbiesError",
    "BadRequestError",
    "NotFoundError",
    "InternalFaultError",
    "setup_logging",
]
