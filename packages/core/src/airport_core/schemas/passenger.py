"""Passenger and flight reference schemas."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from pydantic import (
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from .base import WireModel

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class FlightReference(WireModel):
    """Association to a flight booked by a passenger.

    The flight shape belongs to the flight service, so unknown fields are
    kept as-is instead of being dropped.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictInt | None = None
    flight_number: StrictStr | None = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_id(cls, data: Any) -> Any:
        # Some endpoints serialize flights as a plain list of ids
        if isinstance(data, int) and not isinstance(data, bool):
            return {"id": data}
        return data


class Passenger(WireModel):
    """Passenger with the flights they are booked on, in server order."""

    id: StrictInt
    birthday: date | None = None
    first_name: StrictStr | None = None
    last_name: StrictStr | None = None
    phone_number: StrictStr | None = None
    flights: list[FlightReference] = Field(default_factory=list)

    @field_validator("birthday", mode="before")
    @classmethod
    def _parse_birthday(cls, value: Any) -> Any:
        if value is None or isinstance(value, date):
            return value
        if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
            msg = f"birthday must be a YYYY-MM-DD string, got {value!r}"
            raise ValueError(msg)
        return date.fromisoformat(value)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
