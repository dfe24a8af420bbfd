# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.hobby_repository import HobbyRepository
from ...dto.hobby_dto import HobbyResponse


class ListHobbiesUseCase:
    """Use case for listing every hobby"""
    
    def __init__(self, hobby_repository: HobbyRepository) -> None:
        self.hobby_repository = hobby_repository
    
    async def execute(self) -> List[HobbyResponse]:
        hobbies = await self.hobby_repository.find_all()
        return [HobbyResponse.from_domain(hobby) for hobby in hobbies]
