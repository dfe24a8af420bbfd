"""Pure predicates checking the shape of incoming payloads."""

from .common import MAX_SAFE_INTEGER, is_object_id, is_safe_integer
from .user_guards import is_valid_user
from .hobby_guards import is_valid_hobby, has_owner_reference

__all__ = [
    "MAX_SAFE_INTEGER",
    "is_safe_integer",
    "is_object_id",
    "is_valid_user",
    "is_valid_hobby",
    "has_owner_reference",
]
