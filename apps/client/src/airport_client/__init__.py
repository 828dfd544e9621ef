"""REST client for the airport service."""

from .client import AirportRestClient

__all__ = ["AirportRestClient"]
