from .mongo_connection import get_database, get_user_collection, get_hobby_collection, close_client
from .mongo_user_repository import MongoUserRepository
from .mongo_hobby_repository import MongoHobbyRepository
from .memory_repositories import InMemoryUserRepository, InMemoryHobbyRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_hobby_collection",
    "close_client",
    "MongoUserRepository",
    "MongoHobbyRepository",
    "InMemoryUserRepository",
    "InMemoryHobbyRepository",
]
