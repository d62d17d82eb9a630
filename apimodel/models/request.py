"""
Request - Base model for name translation service requests
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, Dict


class Request(BaseModel):
    """Immutable API request; python fields map to lowerCamelCase wire keys"""

    class Config:
        frozen = True
        populate_by_name = True
        alias_generator = to_camel

    def to_payload(self) -> Dict[str, Any]:
        """Request body keyed by wire names, absent fields omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
