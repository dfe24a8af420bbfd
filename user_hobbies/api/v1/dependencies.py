# Standard library imports
from typing import Any

# External package imports
from fastapi import Request

# Local application imports
from ...core.exceptions import BadRequestError, BAD_JSON_MESSAGE


async def read_json_body(request: Request) -> Any:
    """
    FastAPI dependency returning the decoded JSON body
    
    Bodies are validated by the guards rather than by pydantic, so the raw
    value is passed through. An empty body decodes to an empty object.
    
    Raises:
        BadRequestError: If the body is not valid JSON ("Bad JSON format")
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return await request.json()
    except ValueError:
        raise BadRequestError(BAD_JSON_MESSAGE)
