# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ...dto.user_dto import UserResponse
from ...payloads import user_fields_from

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, payload: Any) -> UserResponse:
        """
        Create a new user
        
        The body must carry ``name`` and a ``hobbies`` array of strings, but a
        new user always starts without hobbies; they are attached through
        hobby creation.
        
        Args:
            payload: Decoded JSON body
            
        Returns:
            UserResponse with the created user
            
        Raises:
            BadRequestError: If the body fails validation
        """
        fields = user_fields_from(payload)
        
        saved_user = await self.user_repository.save(
            User(id=None, name=fields[UserFields.NAME], hobbies=[])
        )
        logger.info(f"Created user {saved_user.id}")
        return UserResponse.from_domain(saved_user)
