"""
Unit tests for user use cases.
"""
from dataclasses import replace
from unittest.mock import AsyncMock

import pytest

from user_hobbies.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUserHobbiesUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from user_hobbies.core.exceptions import BadRequestError, NotFoundError
from user_hobbies.domain.models import Hobby, PassionLevel, User


def _make_user(user_id: str = "usr-1", name: str = "Famous", hobbies=None) -> User:
    return User(id=user_id, name=name, hobbies=list(hobbies or []))


def _make_hobby(hobby_id: str, name: str = "Singing") -> Hobby:
    return Hobby(id=hobby_id, name=name, passion_level=PassionLevel.LOW, year=2020)


class TestCreateUserUseCase:

    @pytest.mark.asyncio
    async def test_create_starts_with_empty_hobbies(self, mock_user_repo):
        mock_user_repo.save.side_effect = lambda user: replace(user, id="usr-new")
        use_case = CreateUserUseCase(mock_user_repo)

        result = await use_case.execute({"name": "Famous", "hobbies": ["h-1"]})

        assert result.id == "usr-new"
        assert result.name == "Famous"
        assert result.hobbies == []
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None

    @pytest.mark.asyncio
    async def test_create_invalid_body_raises(self, mock_user_repo):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(BadRequestError):
            await use_case.execute({"name": 12, "hobbies": []})
        mock_user_repo.save.assert_not_called()


class TestGetAndListUsers:

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user(hobbies=["h-1"])
        result = await GetUserUseCase(mock_user_repo).execute("usr-1")
        assert result.model_dump() == {"id": "usr-1", "name": "Famous", "hobbies": ["h-1"]}

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await GetUserUseCase(mock_user_repo).execute("missing")

    @pytest.mark.asyncio
    async def test_list(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [_make_user("u1", "A"), _make_user("u2", "B")]
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert [user.name for user in result] == ["A", "B"]


class TestUpdateUserUseCase:

    @pytest.mark.asyncio
    async def test_id_in_body_is_ignored(self, mock_user_repo, mock_hobby_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_user_repo.save.side_effect = lambda user: user
        use_case = UpdateUserUseCase(mock_user_repo, mock_hobby_repo)

        result = await use_case.execute("usr-1", {"name": "Paul", "id": "6339f7ja50f48770d8b1c08e"})

        assert result.id == "usr-1"
        assert result.name == "Paul"

    @pytest.mark.asyncio
    async def test_not_found(self, mock_user_repo, mock_hobby_repo):
        mock_user_repo.find_by_id.return_value = None
        use_case = UpdateUserUseCase(mock_user_repo, mock_hobby_repo)
        with pytest.raises(NotFoundError):
            await use_case.execute("missing", {"name": "Paul"})

    @pytest.mark.asyncio
    async def test_invalid_field_rejected_before_lookup(self, mock_user_repo, mock_hobby_repo):
        use_case = UpdateUserUseCase(mock_user_repo, mock_hobby_repo)
        with pytest.raises(BadRequestError):
            await use_case.execute("usr-1", {"hobbies": "not-a-list"})
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_hobby_ids_rejected(self, mock_user_repo, mock_hobby_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_hobby_repo.find_by_id.return_value = None
        use_case = UpdateUserUseCase(mock_user_repo, mock_hobby_repo)
        with pytest.raises(BadRequestError, match="Unknown hobby id"):
            await use_case.execute("usr-1", {"hobbies": ["ghost"]})
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_hobby_ids_stored_as_found(self, mock_user_repo, mock_hobby_repo):
        stored_id = "6339f7fa50f48770d8b1c08e"
        mock_user_repo.find_by_id.return_value = _make_user()
        mock_user_repo.save.side_effect = lambda user: user
        mock_hobby_repo.find_by_id.return_value = _make_hobby(stored_id, "Gaming")
        use_case = UpdateUserUseCase(mock_user_repo, mock_hobby_repo)

        result = await use_case.execute("usr-1", {"hobbies": [stored_id.upper()]})

        assert result.hobbies == [stored_id]

    @pytest.mark.asyncio
    async def test_empty_patch_returns_current(self, mock_user_repo, mock_hobby_repo):
        mock_user_repo.find_by_id.return_value = _make_user()
        use_case = UpdateUserUseCase(mock_user_repo, mock_hobby_repo)
        result = await use_case.execute("usr-1", {})
        assert result.name == "Famous"
        mock_user_repo.save.assert_not_called()


class TestDeleteUserUseCase:

    @pytest.mark.asyncio
    async def test_delete(self, mock_user_repo):
        mock_user_repo.delete.return_value = True
        await DeleteUserUseCase(mock_user_repo).execute("usr-1")
        mock_user_repo.delete.assert_awaited_once_with("usr-1")

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, mock_user_repo):
        mock_user_repo.delete.return_value = False
        with pytest.raises(NotFoundError):
            await DeleteUserUseCase(mock_user_repo).execute("usr-1")


class TestListUserHobbiesUseCase:

    @pytest.mark.asyncio
    async def test_resolves_in_list_order_and_skips_dangling(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user(hobbies=["h-2", "gone", "h-1"])
        hobby_repo = AsyncMock()
        hobbies = {"h-1": _make_hobby("h-1", "Gaming"), "h-2": _make_hobby("h-2", "Dancing")}
        hobby_repo.find_by_id.side_effect = lambda hobby_id: hobbies.get(hobby_id)

        result = await ListUserHobbiesUseCase(mock_user_repo, hobby_repo).execute("usr-1")

        assert [hobby.name for hobby in result] == ["Dancing", "Gaming"]
        assert [call.args[0] for call in hobby_repo.find_by_id.await_args_list] == ["h-2", "gone", "h-1"]

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, mock_user_repo, mock_hobby_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await ListUserHobbiesUseCase(mock_user_repo, mock_hobby_repo).execute("usr-1")
