# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import RepositoryError
from .mongo_connection import get_user_collection
from .object_ids import parse_object_id


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_all(self) -> List[User]:
        try:
            users = []
            async for document in self.user_collection.find({}):
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise RepositoryError(f"Error listing users: {e}") from e
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise (including ids
            that are not valid ObjectIds)
        """
        object_id = parse_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding user by ID: {e}") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            ValueError: If an existing user's ID no longer resolves
            RepositoryError: On any driver fault
        """
        user_dict = self._user_to_dict(user)
        
        try:
            if user.id:
                object_id = parse_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")
                
                updated_document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict},
                    return_document=ReturnDocument.AFTER,
                )
                if updated_document is None:
                    raise ValueError(f"User with ID {user.id} not found")
                return self._document_to_user(updated_document)
            
            result = await self.user_collection.insert_one(user_dict)
            return User(id=str(result.inserted_id), name=user.name, hobbies=list(user.hobbies))
        except PyMongoError as e:
            raise RepositoryError(f"Error saving user: {e}") from e
    
    async def delete(self, user_id: str) -> bool:
        object_id = parse_object_id(user_id)
        if object_id is None:
            return False
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting user: {e}") from e
        return result.deleted_count > 0
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        The public id is always derived from ``_id``.
        """
        if not document or UserFields.MONGO_ID not in document:
            raise RepositoryError("Invalid user document: missing _id field")
        
        try:
            return User(
                id=str(document[UserFields.MONGO_ID]),
                name=document.get(UserFields.NAME, ""),
                hobbies=[str(hobby_id) for hobby_id in document.get(UserFields.HOBBIES) or []],
            )
        except ValueError as e:
            raise RepositoryError(f"Invalid user document {document[UserFields.MONGO_ID]}: {e}") from e
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.NAME: user.name,
            UserFields.HOBBIES: list(user.hobbies),
        }
