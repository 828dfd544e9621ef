"""Shared fixtures for REST client tests (no network: httpx.MockTransport)."""

from __future__ import annotations

import json

import httpx
import pytest

from airport_client.client import AirportRestClient

BASE_URL = "http://airport.test"


class FakeBackend:
    """Canned airport service: replies with a fixed status/body, records requests."""

    def __init__(self) -> None:
        self.status = 200
        self.body = "[]"
        self.requests: list[httpx.Request] = []

    def reply(self, status: int = 200, body: object = "") -> None:
        self.status = status
        self.body = body if isinstance(body, str) else json.dumps(body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "backend received no request"
        return self.requests[-1]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def make_client():
    """Factory fixture: a client whose HTTP traffic goes to *handler*."""

    def _make(handler, base_url: str = BASE_URL) -> AirportRestClient:
        return AirportRestClient(
            base_url, timeout=5.0, transport=httpx.MockTransport(handler)
        )

    return _make


@pytest.fixture
def client(make_client, backend: FakeBackend) -> AirportRestClient:
    return make_client(backend)
