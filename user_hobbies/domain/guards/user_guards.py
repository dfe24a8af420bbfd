# Standard library imports
from typing import Any, Iterable, Mapping, Optional

# Local application imports
from ..constants import UserFields
from .common import is_non_empty_string


def is_valid_user(
    payload: Any,
    keys: Optional[Iterable[str]] = None,
) -> bool:
    """
    Check the shape of a user payload.
    
    Args:
        payload: Decoded JSON body
        keys: Fields to check; defaults to every writable user field.
            Keys that are not user fields are accepted as-is.
            
    Returns:
        True only if every checked field is present and well-typed
    """
    if not isinstance(payload, Mapping):
        return False
    
    checked = UserFields.WRITABLE if keys is None else keys
    for key in checked:
        if key == UserFields.NAME:
            if not is_non_empty_string(payload.get(UserFields.NAME)):
                return False
        elif key == UserFields.HOBBIES:
            hobbies = payload.get(UserFields.HOBBIES)
            if not isinstance(hobbies, list):
                return False
            if not all(isinstance(hobby_id, str) for hobby_id in hobbies):
                return False
    return True
