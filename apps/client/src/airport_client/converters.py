"""Map decoded JSON objects onto the airport domain schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from airport_core.schemas import Aircraft, Airport, City, FlightReference, Passenger

from .errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Callable


M = TypeVar("M", bound=BaseModel)


def _convert(model: type[M], raw: Any) -> M:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        msg = f"{model.__name__}: {exc.error_count()} invalid field(s): {exc}"
        raise ParseError(msg) from exc


def to_city(raw: dict[str, Any]) -> City:
    return _convert(City, raw)


def to_airport(raw: dict[str, Any]) -> Airport:
    """Build an :class:`Airport`; a missing or ``null`` ``city`` becomes ``None``."""
    return _convert(Airport, raw)


def to_aircraft(raw: dict[str, Any]) -> Aircraft:
    return _convert(Aircraft, raw)


def to_flight_reference(raw: dict[str, Any] | int) -> FlightReference:
    """A bare integer is read as the flight id."""
    return _convert(FlightReference, raw)


def to_passenger(raw: dict[str, Any]) -> Passenger:
    """Build a :class:`Passenger`; ``birthday`` must be ``YYYY-MM-DD``."""
    return _convert(Passenger, raw)


CONVERTERS: dict[type[BaseModel], Callable[[Any], BaseModel]] = {
    City: to_city,
    Airport: to_airport,
    Aircraft: to_aircraft,
    FlightReference: to_flight_reference,
    Passenger: to_passenger,
}
