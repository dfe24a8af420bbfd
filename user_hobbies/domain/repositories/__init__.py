from .user_repository import UserRepository
from .hobby_repository import HobbyRepository

__all__ = ["UserRepository", "HobbyRepository"]
