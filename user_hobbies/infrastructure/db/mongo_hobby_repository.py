# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.hobby_repository import HobbyRepository
from ...domain.models.hobby import Hobby
from ...domain.constants import HobbyFields
from ...domain.exceptions import RepositoryError
from .mongo_connection import get_hobby_collection
from .object_ids import parse_object_id


class MongoHobbyRepository(HobbyRepository):
    """MongoDB implementation of HobbyRepository"""
    
    def __init__(self, hobby_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.hobby_collection = hobby_collection if hobby_collection is not None else get_hobby_collection()
    
    async def find_all(self) -> List[Hobby]:
        try:
            cursor = self.hobby_collection.find({})
            hobbies = []
            async for document in cursor:
                hobbies.append(self._document_to_hobby(document))
            return hobbies
        except PyMongoError as e:
            raise RepositoryError(f"Error listing hobbies: {e}") from e
    
    async def find_by_id(self, hobby_id: str) -> Optional[Hobby]:
        object_id = parse_object_id(hobby_id)
        if object_id is None:
            return None
        
        try:
            document = await self.hobby_collection.find_one({HobbyFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding hobby by ID: {e}") from e
        
        if document is None:
            return None
        return self._document_to_hobby(document)
    
    async def save(self, hobby: Hobby) -> Hobby:
        """Save hobby (create new or update existing)"""
        hobby_dict = self._hobby_to_dict(hobby)
        
        try:
            if hobby.id:
                object_id = parse_object_id(hobby.id)
                if object_id is None:
                    raise ValueError(f"Invalid hobby ID format: {hobby.id}")
                
                updated_document = await self.hobby_collection.find_one_and_update(
                    {HobbyFields.MONGO_ID: object_id},
                    {"$set": hobby_dict},
                    return_document=ReturnDocument.AFTER,
                )
                if updated_document is None:
                    raise ValueError(f"Hobby with ID {hobby.id} not found")
                return self._document_to_hobby(updated_document)
            
            result = await self.hobby_collection.insert_one(hobby_dict)
            return Hobby(
                id=str(result.inserted_id),
                name=hobby.name,
                passion_level=hobby.passion_level,
                year=hobby.year,
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error saving hobby: {e}") from e
    
    async def delete(self, hobby_id: str) -> bool:
        object_id = parse_object_id(hobby_id)
        if object_id is None:
            return False
        
        try:
            result = await self.hobby_collection.delete_one({HobbyFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting hobby: {e}") from e
        return result.deleted_count > 0
    
    def _document_to_hobby(self, document: Dict[str, Any]) -> Hobby:
        """Convert MongoDB document to Hobby domain model"""
        if not document or HobbyFields.MONGO_ID not in document:
            raise RepositoryError("Invalid hobby document: missing _id field")
        
        try:
            return Hobby(
                id=str(document[HobbyFields.MONGO_ID]),
                name=document.get(HobbyFields.NAME, ""),
                passion_level=document.get(HobbyFields.PASSION_LEVEL),
                year=document.get(HobbyFields.YEAR),
            )
        except ValueError as e:
            raise RepositoryError(f"Invalid hobby document {document[HobbyFields.MONGO_ID]}: {e}") from e
    
    def _hobby_to_dict(self, hobby: Hobby) -> Dict[str, Any]:
        """Convert Hobby domain model to MongoDB document; passion level stored as ordinal"""
        return {
            HobbyFields.NAME: hobby.name,
            HobbyFields.PASSION_LEVEL: int(hobby.passion_level),
            HobbyFields.YEAR: hobby.year,
        }
