# Standard library imports
from typing import Any, Iterable, Mapping, Optional

# Local application imports
from ..constants import HobbyFields
from ..models.passion_level import is_passion_level_ordinal
from .common import is_non_empty_string, is_object_id, is_safe_integer


def is_valid_hobby(
    payload: Any,
    keys: Optional[Iterable[str]] = None,
) -> bool:
    """
    Check the shape of a hobby payload.
    
    ``passionLevel`` is checked as an ordinal; symbolic values must be
    converted before calling this guard.
    
    Args:
        payload: Decoded JSON body
        keys: Fields to check; defaults to every writable hobby field
        
    Returns:
        True only if every checked field is present and well-typed
    """
    if not isinstance(payload, Mapping):
        return False
    
    checked = HobbyFields.WRITABLE if keys is None else keys
    for key in checked:
        if key == HobbyFields.NAME:
            if not is_non_empty_string(payload.get(HobbyFields.NAME)):
                return False
        elif key == HobbyFields.PASSION_LEVEL:
            if not is_passion_level_ordinal(payload.get(HobbyFields.PASSION_LEVEL)):
                return False
        elif key == HobbyFields.YEAR:
            if not is_safe_integer(payload.get(HobbyFields.YEAR)):
                return False
    return True


def has_owner_reference(payload: Any) -> bool:
    """
    True if the payload names its owning user by an ObjectId string.
    
    A malformed ``userId`` is a bad request; a well-formed one that matches
    no user is a miss, answered later by the owner lookup.
    """
    return isinstance(payload, Mapping) and is_object_id(payload.get(HobbyFields.USER_ID))
