"""
Turn decoded JSON bodies into field dicts the use cases can apply.

Guards decide validity; this module picks the writable fields, runs the
passion level codec before validation (so create and patch validate the
same ordinal form) and coerces integral floats to ``int``.
"""

# Standard library imports
from typing import Any, Dict, Mapping, Tuple

# Local application imports
from ..core.exceptions import BadRequestError
from ..domain.constants import HobbyFields, UserFields
from ..domain.guards import has_owner_reference, is_valid_hobby, is_valid_user
from ..domain.models.passion_level import is_passion_level_symbol, to_ordinal


def user_fields_from(payload: Any, partial: bool = False) -> Dict[str, Any]:
    """
    Validate a user body and return its writable fields.
    
    Args:
        payload: Decoded JSON body
        partial: Check only the keys present (PATCH) instead of all fields
        
    Raises:
        BadRequestError: If the body fails the user guard
    """
    if not isinstance(payload, Mapping):
        raise BadRequestError()
    
    keys = list(payload) if partial else None
    if not is_valid_user(payload, keys):
        raise BadRequestError()
    
    return {
        key: (list(payload[key]) if key == UserFields.HOBBIES else payload[key])
        for key in UserFields.WRITABLE
        if key in payload
    }


def _normalize_passion_level(payload: Mapping[str, Any]) -> Dict[str, Any]:
    data = dict(payload)
    level = data.get(HobbyFields.PASSION_LEVEL)
    if is_passion_level_symbol(level):
        data[HobbyFields.PASSION_LEVEL] = to_ordinal(level)
    return data


def hobby_fields_from(payload: Any, partial: bool = False) -> Dict[str, Any]:
    """
    Validate a hobby body and return its writable fields.
    
    ``passionLevel`` may be given as an ordinal or as a symbol; the result
    always holds the ordinal.
    
    Raises:
        BadRequestError: If the body fails the hobby guard
    """
    if not isinstance(payload, Mapping):
        raise BadRequestError()
    
    data = _normalize_passion_level(payload)
    keys = list(data) if partial else None
    if not is_valid_hobby(data, keys):
        raise BadRequestError()
    
    fields: Dict[str, Any] = {}
    for key in HobbyFields.WRITABLE:
        if key not in data:
            continue
        value = data[key]
        if key in (HobbyFields.PASSION_LEVEL, HobbyFields.YEAR):
            value = int(value)
        fields[key] = value
    return fields


def new_hobby_fields_from(payload: Any) -> Tuple[Dict[str, Any], str]:
    """
    Validate a hobby creation body.
    
    Returns:
        Tuple of (hobby fields, owner user id)
        
    Raises:
        BadRequestError: If the hobby is invalid or ``userId`` is missing or malformed
    """
    fields = hobby_fields_from(payload)
    if not has_owner_reference(payload):
        raise BadRequestError()
    return fields, payload[HobbyFields.USER_ID]
