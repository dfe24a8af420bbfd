import re
from typing import Any

# Largest integer a JSON (IEEE-754 double) client can represent exactly
MAX_SAFE_INTEGER = 2 ** 53 - 1

# Record ids are 24-character hex ObjectId strings, in either case
OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def is_safe_integer(value: Any) -> bool:
    """True for integers (or integral floats) within +/- MAX_SAFE_INTEGER."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False
    return abs(value) <= MAX_SAFE_INTEGER


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_object_id(value: Any) -> bool:
    return isinstance(value, str) and OBJECT_ID_PATTERN.match(value) is not None
