"""
In-memory repositories.

Same contract as the MongoDB repositories, including ObjectId-shaped ids,
so the rest of the application cannot tell them apart. Selected with
``STORAGE_BACKEND=memory``; data lives only as long as the process.

Records are keyed by ``str(ObjectId(id))``, so lookups accept the same
spellings (e.g. upper-case hex) that a MongoDB ``_id`` query does.
"""

# Standard library imports
from dataclasses import replace
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.hobby_repository import HobbyRepository
from ...domain.models.user import User
from ...domain.models.hobby import Hobby
from .object_ids import new_id, parse_object_id


def _key(record_id: str) -> Optional[str]:
    object_id = parse_object_id(record_id)
    return str(object_id) if object_id is not None else None


class InMemoryUserRepository(UserRepository):
    
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
    
    async def find_all(self) -> List[User]:
        return [self._copy(user) for user in self._users.values()]
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(_key(user_id))
        return self._copy(user) if user else None
    
    async def save(self, user: User) -> User:
        if user.id:
            key = _key(user.id)
            if key not in self._users:
                raise ValueError(f"User with ID {user.id} not found")
            stored = replace(user, id=key, hobbies=list(user.hobbies))
        else:
            stored = replace(user, id=new_id(), hobbies=list(user.hobbies))
        self._users[stored.id] = stored
        return self._copy(stored)
    
    async def delete(self, user_id: str) -> bool:
        return self._users.pop(_key(user_id), None) is not None
    
    @staticmethod
    def _copy(user: User) -> User:
        return replace(user, hobbies=list(user.hobbies))


class InMemoryHobbyRepository(HobbyRepository):
    
    def __init__(self) -> None:
        self._hobbies: Dict[str, Hobby] = {}
    
    async def find_all(self) -> List[Hobby]:
        return [replace(hobby) for hobby in self._hobbies.values()]
    
    async def find_by_id(self, hobby_id: str) -> Optional[Hobby]:
        hobby = self._hobbies.get(_key(hobby_id))
        return replace(hobby) if hobby else None
    
    async def save(self, hobby: Hobby) -> Hobby:
        if hobby.id:
            key = _key(hobby.id)
            if key not in self._hobbies:
                raise ValueError(f"Hobby with ID {hobby.id} not found")
            stored = replace(hobby, id=key)
        else:
            stored = replace(hobby, id=new_id())
        self._hobbies[stored.id] = stored
        return replace(stored)
    
    async def delete(self, hobby_id: str) -> bool:
        return self._hobbies.pop(_key(hobby_id), None) is not None
