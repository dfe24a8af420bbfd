from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.hobby_repository import HobbyRepository
from ...application.use_cases.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    ListUserHobbiesUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository),
                hobby_repository=container.get(HobbyRepository),
            )
        )
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            ListUserHobbiesUseCase,
            lambda: ListUserHobbiesUseCase(
                user_repository=container.get(UserRepository),
                hobby_repository=container.get(HobbyRepository),
            )
        )
