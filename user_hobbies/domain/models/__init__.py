from .user import User
from .hobby import Hobby
from .passion_level import PassionLevel, PassionLevelError

__all__ = ["User", "Hobby", "PassionLevel", "PassionLevelError"]
