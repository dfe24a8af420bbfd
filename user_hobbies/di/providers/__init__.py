from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .hobby_provider import HobbyProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "HobbyProvider",
]
