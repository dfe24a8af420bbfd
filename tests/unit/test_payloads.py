"""
Unit tests for payload validation and normalization.
"""
import pytest

from user_hobbies.application.payloads import (
    hobby_fields_from,
    new_hobby_fields_from,
    user_fields_from,
)
from user_hobbies.core.exceptions import BadRequestError


class TestUserFields:

    def test_create_requires_all_fields(self):
        with pytest.raises(BadRequestError):
            user_fields_from({"name": "Famous"})

    def test_patch_strips_id_and_unknown_keys(self):
        fields = user_fields_from({"name": "Paul", "id": "other", "age": 3}, partial=True)
        assert fields == {"name": "Paul"}

    def test_non_object_body(self):
        with pytest.raises(BadRequestError):
            user_fields_from([1, 2], partial=True)


class TestHobbyFields:

    def test_symbolic_level_converted(self):
        fields = hobby_fields_from({"name": "Singing", "passionLevel": "very-high", "year": 2020})
        assert fields["passionLevel"] == 3

    def test_patch_symbol_and_ordinal_validate_alike(self):
        assert hobby_fields_from({"passionLevel": "high"}, partial=True) == {"passionLevel": 2}
        assert hobby_fields_from({"passionLevel": 2}, partial=True) == {"passionLevel": 2}

    def test_integral_floats_coerced(self):
        fields = hobby_fields_from({"name": "Chess", "passionLevel": 1.0, "year": 2020.0})
        assert fields == {"name": "Chess", "passionLevel": 1, "year": 2020}
        assert isinstance(fields["year"], int)

    def test_unknown_symbol_rejected(self):
        with pytest.raises(BadRequestError):
            hobby_fields_from({"passionLevel": "extreme"}, partial=True)

    def test_new_hobby_requires_owner(self):
        with pytest.raises(BadRequestError):
            new_hobby_fields_from({"name": "Singing", "passionLevel": 0, "year": 2020})

    def test_new_hobby_invalid_even_with_owner(self):
        with pytest.raises(BadRequestError):
            new_hobby_fields_from({"name": "Singing", "year": 2020, "userId": "6339f7fa50f48770d8b1c08e"})

    def test_new_hobby(self):
        fields, owner = new_hobby_fields_from(
            {"name": "Singing", "passionLevel": 0, "year": 2020, "userId": "6339f7fa50f48770d8b1c08e"}
        )
        assert owner == "6339f7fa50f48770d8b1c08e"
        assert "userId" not in fields
