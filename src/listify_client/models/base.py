"""
Base classes for Listify wire models.

The backend speaks camelCase JSON. Models expose snake_case attributes and
accept either spelling on construction.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ListifyModel(BaseModel):
    """
    Base for models parsed from backend responses.

    Unknown fields are kept rather than dropped, so a backend that grows new
    fields does not lose data on the way through the client.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to the camelCase wire form, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ListifyInput(BaseModel):
    """
    Base for request bodies.

    Unknown fields are rejected. Only the fields a caller actually set are
    serialized, which gives PATCH bodies their partial-update meaning.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump to the camelCase JSON body sent to the backend."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
