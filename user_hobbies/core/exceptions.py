"""
Error taxonomy for the user hobbies API.

Every error the API reports deliberately is a ``UserHobbiesError``. The
global handlers in ``main.py`` render them as ``{"status", "message"}``
with the matching HTTP status; anything else becomes a generic 500.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from http import HTTPStatus
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserHobbiesError(Exception):
    """Base exception for errors reported to API clients."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or HTTPStatus(self.status_code).phrase
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"status": int(self.status_code), "message": self.message}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class BadRequestError(UserHobbiesError):
    """Malformed JSON, failed field validation, or a bad owner reference."""

    status_code = HTTPStatus.BAD_REQUEST


class NotFoundError(UserHobbiesError):
    """An id does not resolve to a record."""

    status_code = HTTPStatus.NOT_FOUND


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalFaultError(UserHobbiesError):
    """Unexpected store or runtime fault."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


BAD_JSON_MESSAGE = "Bad JSON format"
INVALID_USER_ID_MESSAGE = "Invalid user id"
