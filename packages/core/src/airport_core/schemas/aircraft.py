"""Aircraft schema."""

from __future__ import annotations

from pydantic import StrictInt, StrictStr

from .base import WireModel


class Aircraft(WireModel):
    id: StrictInt
    tail_number: StrictStr | None = None
    model: StrictStr | None = None
