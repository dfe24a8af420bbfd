"""
Hobby membership service
------------------------

Keeps each user's ``hobbies`` id list in step with hobby creation and
deletion done through the hobby endpoints.

Each change is a read / modify / write of the owner document, issued
after the hobby itself was written. The two writes are not atomic: if the
process dies in between, or two requests touch the same owner
concurrently, the list and the hobby collection can diverge (a hobby with
no owner, or a lost append). Readers tolerate this by skipping ids that do
not resolve. Registration is idempotent, so a failed request can simply be
retried.
"""

# Standard library imports
import logging
from dataclasses import replace
from typing import Optional

# Local application imports
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class HobbyMembershipService:
    """Maintains the user -> hobby id list"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def register(self, owner_user_id: str, hobby_id: str) -> Optional[User]:
        """
        Append a hobby id to its owner's list.
        
        Args:
            owner_user_id: ID of the owning user
            hobby_id: ID of the newly created hobby
            
        Returns:
            The updated owner, or None if the owner disappeared meanwhile
        """
        owner = await self.user_repository.find_by_id(owner_user_id)
        if owner is None:
            logger.warning(f"Owner {owner_user_id} vanished before hobby {hobby_id} could be registered")
            return None
        
        if hobby_id in owner.hobbies:
            return owner
        
        updated = await self.user_repository.save(replace(owner, hobbies=owner.hobbies + [hobby_id]))
        logger.debug(f"Registered hobby {hobby_id} with user {owner_user_id}")
        return updated
    
    async def deregister(self, owner_user_id: str, hobby_id: str) -> Optional[User]:
        """
        Remove a hobby id from its owner's list.
        
        Removing an id that is not in the list is a no-op.
        
        Returns:
            The (possibly unchanged) owner, or None if the owner disappeared
        """
        owner = await self.user_repository.find_by_id(owner_user_id)
        if owner is None:
            logger.warning(f"Owner {owner_user_id} vanished before hobby {hobby_id} could be removed")
            return None
        
        remaining = [existing for existing in owner.hobbies if existing != hobby_id]
        if len(remaining) == len(owner.hobbies):
            return owner
        
        updated = await self.user_repository.save(replace(owner, hobbies=remaining))
        logger.debug(f"Removed hobby {hobby_id} from user {owner_user_id}")
        return updated
