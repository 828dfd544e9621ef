"""Core schemas for the airport client."""

from .aircraft import Aircraft
from .airport import Airport, City
from .base import WireModel
from .passenger import FlightReference, Passenger
from .result import FetchResult

__all__ = [
    "Aircraft",
    "Airport",
    "City",
    "FetchResult",
    "FlightReference",
    "Passenger",
    "WireModel",
]
