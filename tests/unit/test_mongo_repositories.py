"""
Unit tests for the MongoDB repositories with a mocked motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from user_hobbies.application.services.hobby_membership_service import HobbyMembershipService
from user_hobbies.application.use_cases.hobby import DeleteHobbyUseCase
from user_hobbies.domain.exceptions import RepositoryError
from user_hobbies.domain.models import Hobby, PassionLevel, User
from user_hobbies.infrastructure.db.mongo_hobby_repository import MongoHobbyRepository
from user_hobbies.infrastructure.db.mongo_user_repository import MongoUserRepository
from user_hobbies.infrastructure.db.memory_repositories import InMemoryUserRepository


class _Cursor:
    """Async-iterable stand-in for a motor cursor."""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._documents:
            raise StopAsyncIteration
        return self._documents.pop(0)


def _collection(documents=()):
    collection = MagicMock()
    collection.find.return_value = _Cursor(documents)
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


class TestMongoUserRepository:

    @pytest.mark.asyncio
    async def test_find_all_derives_id_from_object_id(self):
        object_id = ObjectId()
        hobby_id = ObjectId()
        repo = MongoUserRepository(_collection([{"_id": object_id, "name": "Famous", "hobbies": [hobby_id]}]))

        users = await repo.find_all()

        assert users == [User(id=str(object_id), name="Famous", hobbies=[str(hobby_id)])]

    @pytest.mark.asyncio
    async def test_find_by_invalid_id_skips_query(self):
        collection = _collection()
        repo = MongoUserRepository(collection)
        assert await repo.find_by_id("6339f7ja50f48770d8b1c08e") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_insert_returns_generated_id(self):
        collection = _collection()
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        repo = MongoUserRepository(collection)

        saved = await repo.save(User(id=None, name="Famous"))

        assert saved.id == str(inserted_id)
        collection.insert_one.assert_awaited_once_with({"name": "Famous", "hobbies": []})

    @pytest.mark.asyncio
    async def test_update_sets_fields_without_id(self):
        collection = _collection()
        object_id = ObjectId()
        collection.find_one_and_update.return_value = {"_id": object_id, "name": "Paul", "hobbies": []}
        repo = MongoUserRepository(collection)

        saved = await repo.save(User(id=str(object_id), name="Paul"))

        assert saved.name == "Paul"
        query, update = collection.find_one_and_update.await_args.args
        assert query == {"_id": object_id}
        assert update == {"$set": {"name": "Paul", "hobbies": []}}

    @pytest.mark.asyncio
    async def test_update_missing_raises_value_error(self):
        collection = _collection()
        collection.find_one_and_update.return_value = None
        repo = MongoUserRepository(collection)
        with pytest.raises(ValueError, match="not found"):
            await repo.save(User(id=str(ObjectId()), name="Paul"))

    @pytest.mark.asyncio
    async def test_driver_fault_wrapped(self):
        collection = _collection()
        collection.find_one.side_effect = PyMongoError("connection refused")
        repo = MongoUserRepository(collection)
        with pytest.raises(RepositoryError, match="connection refused"):
            await repo.find_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_delete(self):
        collection = _collection()
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        repo = MongoUserRepository(collection)
        assert await repo.delete(str(ObjectId())) is False


class TestMongoHobbyRepository:

    @pytest.mark.asyncio
    async def test_stores_ordinal(self):
        collection = _collection()
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
        repo = MongoHobbyRepository(collection)

        saved = await repo.save(Hobby(id=None, name="Singing", passion_level=PassionLevel.HIGH, year=2020))

        assert saved.passion_level is PassionLevel.HIGH
        collection.insert_one.assert_awaited_once_with({"name": "Singing", "passionLevel": 2, "year": 2020})

    @pytest.mark.asyncio
    async def test_corrupt_document_is_store_fault(self):
        repo = MongoHobbyRepository(
            _collection([{"_id": ObjectId(), "name": "Singing", "passionLevel": 7, "year": 2020}])
        )
        with pytest.raises(RepositoryError):
            await repo.find_all()


class TestDeleteHobbyAgainstMongo:

    @pytest.mark.asyncio
    async def test_upper_case_hobby_id_leaves_owner_list_clean(self):
        hobby_id = ObjectId()
        collection = _collection()
        collection.find_one.return_value = {
            "_id": hobby_id, "name": "Singing", "passionLevel": 0, "year": 2020,
        }
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        hobby_repo = MongoHobbyRepository(collection)
        user_repo = InMemoryUserRepository()
        owner = await user_repo.save(User(id=None, name="Famous", hobbies=[str(hobby_id)]))
        use_case = DeleteHobbyUseCase(hobby_repo, user_repo, HobbyMembershipService(user_repo))

        await use_case.execute(owner.id, str(hobby_id).upper())

        collection.delete_one.assert_awaited_once_with({"_id": hobby_id})
        assert (await user_repo.find_by_id(owner.id)).hobbies == []
