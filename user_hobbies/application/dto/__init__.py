from .user_dto import UserResponse
from .hobby_dto import HobbyResponse

__all__ = [
    "UserResponse",
    "HobbyResponse",
]
