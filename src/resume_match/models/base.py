"""Shared pydantic base for records exchanged with the UI."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys; accepts either on input."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
