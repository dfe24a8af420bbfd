from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.hobby import Hobby


class HobbyRepository(ABC):
    """Repository interface - defines contract for hobby data access"""
    
    @abstractmethod
    async def find_all(self) -> List[Hobby]:
        """List every hobby"""
        pass
    
    @abstractmethod
    async def find_by_id(self, hobby_id: str) -> Optional[Hobby]:
        """Find hobby by ID"""
        pass
    
    @abstractmethod
    async def save(self, hobby: Hobby) -> Hobby:
        """Save hobby (create when id is None, otherwise update)"""
        pass
    
    @abstractmethod
    async def delete(self, hobby_id: str) -> bool:
        """Delete hobby by ID; False if no such hobby"""
        pass
