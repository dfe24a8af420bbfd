# Standard library imports
import logging
from typing import List

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.hobby_repository import HobbyRepository
from ...dto.hobby_dto import HobbyResponse

logger = logging.getLogger(__name__)


class ListUserHobbiesUseCase:
    """Use case for resolving a user's hobby id list into hobby records"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        hobby_repository: HobbyRepository,
    ) -> None:
        self.user_repository = user_repository
        self.hobby_repository = hobby_repository
    
    async def execute(self, user_id: str) -> List[HobbyResponse]:
        """
        List a user's hobbies in the order they were added
        
        Ids are resolved one at a time, in list order. Ids that no longer
        resolve are skipped.
        
        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError()
        
        hobbies: List[HobbyResponse] = []
        for hobby_id in user.hobbies:
            hobby = await self.hobby_repository.find_by_id(hobby_id)
            if hobby is None:
                logger.warning(f"Skipping dangling hobby id {hobby_id} of user {user_id}")
                continue
            hobbies.append(HobbyResponse.from_domain(hobby))
        return hobbies
