from .user_controller import router as user_router
from .hobby_controller import router as hobby_router


__all__ = ["user_router", "hobby_router"]
