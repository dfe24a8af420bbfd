# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import NotFoundError, INVALID_USER_ID_MESSAGE
from ....domain.repositories.hobby_repository import HobbyRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.hobby import Hobby
from ...dto.hobby_dto import HobbyResponse
from ...payloads import new_hobby_fields_from
from ...services.hobby_membership_service import HobbyMembershipService
from ._fields import to_attributes

logger = logging.getLogger(__name__)


class CreateHobbyUseCase:
    """Use case for creating a hobby on behalf of its owner"""
    
    def __init__(
        self,
        hobby_repository: HobbyRepository,
        user_repository: UserRepository,
        membership_service: HobbyMembershipService,
    ) -> None:
        self.hobby_repository = hobby_repository
        self.user_repository = user_repository
        self.membership_service = membership_service
    
    async def execute(self, payload: Any) -> HobbyResponse:
        """
        Create a hobby and append it to its owner's list
        
        Args:
            payload: Decoded JSON body: ``name``, ``passionLevel``, ``year``, ``userId``
            
        Returns:
            HobbyResponse with the created hobby
            
        Raises:
            BadRequestError: If the hobby is invalid or ``userId`` is missing or malformed
            NotFoundError: If the owner does not exist
        """
        fields, owner_user_id = new_hobby_fields_from(payload)
        
        owner = await self.user_repository.find_by_id(owner_user_id)
        if owner is None:
            logger.debug(f"Hobby owner {owner_user_id} not found")
            raise NotFoundError(INVALID_USER_ID_MESSAGE)
        
        saved_hobby = await self.hobby_repository.save(Hobby(id=None, **to_attributes(fields)))
        await self.membership_service.register(owner.id, saved_hobby.id)
        
        logger.info(
            f"Created hobby {saved_hobby.id} ({saved_hobby.passion_level.symbol}) "
            f"for user {owner_user_id}"
        )
        return HobbyResponse.from_domain(saved_hobby)
