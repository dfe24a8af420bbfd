# Standard library imports
import logging
from dataclasses import replace
from typing import Any, List

# Local application imports
from ....core.exceptions import BadRequestError, NotFoundError
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.hobby_repository import HobbyRepository
from ....domain.constants import UserFields
from ...dto.user_dto import UserResponse
from ...payloads import user_fields_from

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        hobby_repository: HobbyRepository,
    ) -> None:
        self.user_repository = user_repository
        self.hobby_repository = hobby_repository
    
    async def execute(self, user_id: str, payload: Any) -> UserResponse:
        """
        Apply the fields present in the body to a user
        
        ``id`` and unknown keys are ignored. A replacement ``hobbies`` list
        may only name hobbies that exist.
        
        Args:
            user_id: ID of the user to update
            payload: Decoded JSON body with any of ``name``, ``hobbies``
            
        Returns:
            UserResponse with the updated user
            
        Raises:
            BadRequestError: If the body fails validation or names unknown hobbies
            NotFoundError: If the user does not exist
        """
        fields = user_fields_from(payload, partial=True)
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.debug(f"User {user_id} not found for update")
            raise NotFoundError()
        
        if UserFields.HOBBIES in fields:
            fields[UserFields.HOBBIES] = await self._resolve_hobby_ids(fields[UserFields.HOBBIES])
        
        if not fields:
            return UserResponse.from_domain(user)
        
        updated_user = await self.user_repository.save(replace(user, **fields))
        logger.info(f"Updated user {user_id} fields: {', '.join(fields)}")
        return UserResponse.from_domain(updated_user)
    
    async def _resolve_hobby_ids(self, hobby_ids: List[str]) -> List[str]:
        """Map each requested id to the id of the stored hobby it names."""
        resolved = []
        for hobby_id in hobby_ids:
            hobby = await self.hobby_repository.find_by_id(hobby_id)
            if hobby is None:
                raise BadRequestError(f"Unknown hobby id: {hobby_id}")
            resolved.append(hobby.id)
        return resolved
