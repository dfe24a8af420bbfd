from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.hobby_repository import HobbyRepository
from ...application.services.hobby_membership_service import HobbyMembershipService
from ...application.use_cases.hobby import (
    CreateHobbyUseCase,
    GetHobbyUseCase,
    ListHobbiesUseCase,
    UpdateHobbyUseCase,
    DeleteHobbyUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class HobbyProvider:
    """Hobby use case provider - registers the membership service and hobby use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            HobbyMembershipService,
            HobbyMembershipService(user_repository=container.get(UserRepository))
        )
        
        container.register_factory(
            CreateHobbyUseCase,
            lambda: CreateHobbyUseCase(
                hobby_repository=container.get(HobbyRepository),
                user_repository=container.get(UserRepository),
                membership_service=container.get(HobbyMembershipService),
            )
        )
        container.register_factory(
            GetHobbyUseCase,
            lambda: GetHobbyUseCase(hobby_repository=container.get(HobbyRepository))
        )
        container.register_factory(
            ListHobbiesUseCase,
            lambda: ListHobbiesUseCase(hobby_repository=container.get(HobbyRepository))
        )
        container.register_factory(
            UpdateHobbyUseCase,
            lambda: UpdateHobbyUseCase(hobby_repository=container.get(HobbyRepository))
        )
        container.register_factory(
            DeleteHobbyUseCase,
            lambda: DeleteHobbyUseCase(
                hobby_repository=container.get(HobbyRepository),
                user_repository=container.get(UserRepository),
                membership_service=container.get(HobbyMembershipService),
            )
        )
