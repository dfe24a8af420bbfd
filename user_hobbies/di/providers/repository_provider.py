from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.hobby_repository import HobbyRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_hobby_repository import MongoHobbyRepository
from ...infrastructure.db.memory_repositories import InMemoryUserRepository, InMemoryHobbyRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations for the configured storage backend.
        """
        if get_settings().storage_backend == "memory":
            container.register_singleton(UserRepository, InMemoryUserRepository())
            container.register_singleton(HobbyRepository, InMemoryHobbyRepository())
            return
        
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        container.register_singleton(
            HobbyRepository,
            MongoHobbyRepository(hobby_collection=container.get("hobby_collection"))
        )
