# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.hobby_repository import HobbyRepository
from ...dto.hobby_dto import HobbyResponse

logger = logging.getLogger(__name__)


class GetHobbyUseCase:
    """Use case for getting a hobby by ID"""
    
    def __init__(self, hobby_repository: HobbyRepository) -> None:
        self.hobby_repository = hobby_repository
    
    async def execute(self, hobby_id: str) -> HobbyResponse:
        hobby = await self.hobby_repository.find_by_id(hobby_id)
        if hobby is None:
            logger.debug(f"Hobby {hobby_id} not found")
            raise NotFoundError()
        return HobbyResponse.from_domain(hobby)
