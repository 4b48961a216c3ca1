"""Base model class for all stored records."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredModel(BaseModel):
    """Base model for records persisted as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_record(self) -> Dict[str, Any]:
        """Dump to the JSON-ready dict stored under a key."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
