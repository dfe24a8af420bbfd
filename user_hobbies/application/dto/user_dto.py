from typing import List

from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (the user projection)"""
    id: str
    name: str
    hobbies: List[str]

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id or "", name=user.name, hobbies=list(user.hobbies))
