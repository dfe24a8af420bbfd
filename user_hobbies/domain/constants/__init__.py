"""Constants for domain model field names"""

from .user_fields import UserFields
from .hobby_fields import HobbyFields

__all__ = [
    "UserFields",
    "HobbyFields",
]
