# Standard library imports
from typing import Any, List

# External package imports
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

# Local application imports
from ...application.dto.user_dto import UserResponse
from ...application.dto.hobby_dto import HobbyResponse
from ...application.use_cases.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    ListUserHobbiesUseCase,
)
from ...core.exceptions import BadRequestError
from ...di.container import get_container
from ...domain.exceptions import RepositoryError
from .dependencies import read_json_body


router = APIRouter(tags=["User"])


@router.get("/users", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """Get all users"""
    use_case = get_container().get(ListUsersUseCase)
    
    try:
        return await use_case.execute()
    except RepositoryError:
        raise BadRequestError()


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    """Fetch user based on user id"""
    use_case = get_container().get(GetUserUseCase)
    return await use_case.execute(user_id)


@router.post("/user", response_model=UserResponse)
async def create_user(payload: Any = Depends(read_json_body)) -> UserResponse:
    """
    Create a new user
    
    Body: ``{"name": str, "hobbies": []}``
    """
    use_case = get_container().get(CreateUserUseCase)
    return await use_case.execute(payload)


@router.patch("/user/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, payload: Any = Depends(read_json_body)) -> UserResponse:
    """Update user based on user id; ``id`` in the body is ignored"""
    use_case = get_container().get(UpdateUserUseCase)
    return await use_case.execute(user_id, payload)


@router.delete("/user/{user_id}", response_class=PlainTextResponse)
async def delete_user(user_id: str) -> str:
    """Delete user based on user id"""
    use_case = get_container().get(DeleteUserUseCase)
    await use_case.execute(user_id)
    return "OK"


@router.get("/user/{user_id}/hobbies", response_model=List[HobbyResponse])
async def list_user_hobbies(user_id: str) -> List[HobbyResponse]:
    """Get user hobbies based on user id, in the order they were added"""
    use_case = get_container().get(ListUserHobbiesUseCase)
    return await use_case.execute(user_id)
