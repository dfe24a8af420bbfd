from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
from .list_user_hobbies import ListUserHobbiesUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListUserHobbiesUseCase",
]
