# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError, INVALID_USER_ID_MESSAGE
from ....domain.repositories.hobby_repository import HobbyRepository
from ....domain.repositories.user_repository import UserRepository
from ...services.hobby_membership_service import HobbyMembershipService

logger = logging.getLogger(__name__)


class DeleteHobbyUseCase:
    """Use case for deleting a hobby and removing it from its owner's list"""
    
    def __init__(
        self,
        hobby_repository: HobbyRepository,
        user_repository: UserRepository,
        membership_service: HobbyMembershipService,
    ) -> None:
        self.hobby_repository = hobby_repository
        self.user_repository = user_repository
        self.membership_service = membership_service
    
    async def execute(self, owner_user_id: str, hobby_id: str) -> None:
        """
        Delete a hobby, then deregister it from the owner
        
        The stored ids of the owner and the hobby are used from the lookups on,
        so a request id spelled differently (e.g. upper-case hex) still clears
        the owner's list.
        
        Raises:
            NotFoundError: If the owner or the hobby does not exist
        """
        owner = await self.user_repository.find_by_id(owner_user_id)
        if owner is None:
            raise NotFoundError(INVALID_USER_ID_MESSAGE)
        
        hobby = await self.hobby_repository.find_by_id(hobby_id)
        if hobby is None:
            raise NotFoundError()
        
        deleted = await self.hobby_repository.delete(hobby.id)
        if not deleted:
            raise NotFoundError()
        
        await self.membership_service.deregister(owner.id, hobby.id)
        logger.info(f"Deleted hobby {hobby.id} of user {owner.id}")
