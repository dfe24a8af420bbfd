from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.hobby import Hobby


class HobbyResponse(BaseModel):
    """DTO for hobby response; passion level is the ordinal 0-3"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    passion_level: int = Field(alias="passionLevel", ge=0, le=3)
    year: int

    @classmethod
    def from_domain(cls, hobby: Hobby) -> "HobbyResponse":
        return cls(
            id=hobby.id or "",
            name=hobby.name,
            passion_level=int(hobby.passion_level),
            year=hobby.year,
        )
