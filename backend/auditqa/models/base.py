"""Shared pydantic base for records exchanged with the browser client.

Records are persisted by the client in camelCase JSON; Python code uses
snake_case attributes. Either spelling is accepted on input and
``model_dump(by_alias=True)`` reproduces the persisted shape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """BaseModel with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Plain JSON-serializable dict in the persisted (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)
