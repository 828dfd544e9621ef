"""Shared base for entities exchanged with the airport REST service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable value object with camelCase field names on the wire.

    Unknown JSON fields are dropped so newer servers stay compatible.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
