# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID
        
        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.debug(f"User {user_id} not found")
            raise NotFoundError()
        return UserResponse.from_domain(user)
