# Standard library imports
from typing import Any, List

# External package imports
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

# Local application imports
from ...application.dto.hobby_dto import HobbyResponse
from ...application.use_cases.hobby import (
    CreateHobbyUseCase,
    GetHobbyUseCase,
    ListHobbiesUseCase,
    UpdateHobbyUseCase,
    DeleteHobbyUseCase,
)
from ...core.exceptions import BadRequestError
from ...di.container import get_container
from ...domain.exceptions import RepositoryError
from .dependencies import read_json_body


router = APIRouter(tags=["Hobby"])


@router.get("/hobbies", response_model=List[HobbyResponse])
async def list_hobbies() -> List[HobbyResponse]:
    """Get all hobbies"""
    use_case = get_container().get(ListHobbiesUseCase)
    
    try:
        return await use_case.execute()
    except RepositoryError:
        raise BadRequestError()


@router.get("/hobby/{hobby_id}", response_model=HobbyResponse)
async def get_hobby(hobby_id: str) -> HobbyResponse:
    """Fetch hobby based on hobby id"""
    use_case = get_container().get(GetHobbyUseCase)
    return await use_case.execute(hobby_id)


@router.post("/hobby", response_model=HobbyResponse)
async def create_hobby(payload: Any = Depends(read_json_body)) -> HobbyResponse:
    """
    Create a new hobby for an existing user
    
    Body: ``{"name": str, "passionLevel": 0-3, "year": int, "userId": str}``
    """
    use_case = get_container().get(CreateHobbyUseCase)
    return await use_case.execute(payload)


@router.patch("/hobby/{hobby_id}", response_model=HobbyResponse)
async def update_hobby(hobby_id: str, payload: Any = Depends(read_json_body)) -> HobbyResponse:
    """Update hobby based on hobby id"""
    use_case = get_container().get(UpdateHobbyUseCase)
    return await use_case.execute(hobby_id, payload)


@router.delete("/hobby/{user_id}/{hobby_id}", response_class=PlainTextResponse)
async def delete_hobby(user_id: str, hobby_id: str) -> str:
    """Delete hobby based on hobby id and remove it from the user's list"""
    use_case = get_container().get(DeleteHobbyUseCase)
    await use_case.execute(user_id, hobby_id)
    return "OK"
