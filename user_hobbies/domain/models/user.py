from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class User:
    """
    Pure domain model for User entity.
    
    ``hobbies`` holds hobby ids in insertion order; it is a reference list,
    never embedded hobby records.
    """
    id: Optional[str]
    name: str
    hobbies: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("User name is required")
        if any(not isinstance(hobby_id, str) for hobby_id in self.hobbies):
            raise ValueError("Hobby ids must be strings")
