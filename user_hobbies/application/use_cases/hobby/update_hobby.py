# Standard library imports
import logging
from dataclasses import replace
from typing import Any

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.hobby_repository import HobbyRepository
from ...dto.hobby_dto import HobbyResponse
from ...payloads import hobby_fields_from
from ._fields import to_attributes

logger = logging.getLogger(__name__)


class UpdateHobbyUseCase:
    """Use case for partially updating a hobby; no user list is touched"""
    
    def __init__(self, hobby_repository: HobbyRepository) -> None:
        self.hobby_repository = hobby_repository
    
    async def execute(self, hobby_id: str, payload: Any) -> HobbyResponse:
        """
        Apply the fields present in the body to a hobby
        
        Args:
            hobby_id: ID of the hobby to update
            payload: Decoded JSON body with any of ``name``, ``passionLevel``, ``year``
            
        Raises:
            BadRequestError: If a present field fails validation
            NotFoundError: If the hobby does not exist
        """
        fields = hobby_fields_from(payload, partial=True)
        
        hobby = await self.hobby_repository.find_by_id(hobby_id)
        if hobby is None:
            logger.debug(f"Hobby {hobby_id} not found for update")
            raise NotFoundError()
        
        if not fields:
            return HobbyResponse.from_domain(hobby)
        
        updated_hobby = await self.hobby_repository.save(replace(hobby, **to_attributes(fields)))
        logger.info(f"Updated hobby {hobby_id} fields: {', '.join(fields)}")
        return HobbyResponse.from_domain(updated_hobby)
