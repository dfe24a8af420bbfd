# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from .passion_level import PassionLevel


@dataclass
class Hobby:
    """
    Pure domain model for Hobby entity.
    
    A hobby does not know its owner; ownership lives in the owning user's
    ``hobbies`` list.
    """
    id: Optional[str]
    name: str
    passion_level: PassionLevel
    year: int

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Hobby name is required")
        self.passion_level = PassionLevel(self.passion_level)
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValueError("Hobby year must be an integer")
