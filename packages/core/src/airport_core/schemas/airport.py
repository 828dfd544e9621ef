"""Airport and its embedded city."""

from __future__ import annotations

from pydantic import StrictInt, StrictStr

from .base import WireModel


class City(WireModel):
    """City record nested inside an airport payload."""

    id: StrictInt
    name: StrictStr | None = None
    state: StrictStr | None = None
    population: StrictInt | None = None


class Airport(WireModel):
    """Airport with an owned city (``None`` when the payload omits it)."""

    id: StrictInt
    name: StrictStr | None = None
    code: StrictStr | None = None
    city: City | None = None
