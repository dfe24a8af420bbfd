from typing import Any, Dict

from ....domain.constants import HobbyFields

# Request/document field name -> Hobby attribute
_ATTRIBUTES = {
    HobbyFields.NAME: "name",
    HobbyFields.PASSION_LEVEL: "passion_level",
    HobbyFields.YEAR: "year",
}


def to_attributes(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {_ATTRIBUTES[key]: value for key, value in fields.items()}
