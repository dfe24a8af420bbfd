from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create when id is None, otherwise update)"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID; False if no such user"""
        pass
