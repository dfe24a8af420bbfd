from .create_hobby import CreateHobbyUseCase
from .get_hobby import GetHobbyUseCase
from .list_hobbies import ListHobbiesUseCase
from .update_hobby import UpdateHobbyUseCase
from .delete_hobby import DeleteHobbyUseCase

__all__ = [
    "CreateHobbyUseCase",
    "GetHobbyUseCase",
    "ListHobbiesUseCase",
    "UpdateHobbyUseCase",
    "DeleteHobbyUseCase",
]
