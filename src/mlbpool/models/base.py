from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class CamelModel(BaseModel):
    """Frozen model that reads and writes the camelCase keys used in the JSON files."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
