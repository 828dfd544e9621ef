"""CLI rendering on top of a mocked airport service."""

from __future__ import annotations

import json

import httpx
import pytest
from click.testing import CliRunner

from airport_client import cli as cli_module
from airport_client.client import AirportRestClient


@pytest.fixture
def run_cli(monkeypatch, backend):
    """Invoke the CLI with every client request routed to *backend*."""

    def _client(base_url: str) -> AirportRestClient:
        return AirportRestClient(base_url, transport=httpx.MockTransport(backend))

    monkeypatch.setattr(cli_module, "AirportRestClient", _client)
    # Keep INFO records out of the captured output
    monkeypatch.setattr(cli_module.settings, "log_level", "WARNING")
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(
            cli_module.cli, ["--base-url", "http://airport.test", *args]
        )

    return _run


def test_aircraft_text_output(run_cli, backend):
    backend.reply(200, [{"id": 10, "tailNumber": "C-ABC", "model": "Boeing 737"}])

    result = run_cli("aircraft")

    assert result.exit_code == 0, result.output
    assert "Found 1 aircraft" in result.output
    assert "C-ABC" in result.output
    assert backend.last_request.url.path == "/aircraft"


def test_passengers_text_output(run_cli, backend):
    backend.reply(
        200,
        [{"id": 1, "birthday": "1990-01-01", "firstName": "Alice", "lastName": "Smith"}],
    )

    result = run_cli("passengers")

    assert result.exit_code == 0, result.output
    assert "Alice Smith" in result.output
    assert "1990-01-01" in result.output


def test_empty_result_message(run_cli, backend):
    backend.reply(500, "")

    result = run_cli("airports")

    assert result.exit_code == 0
    assert "No airports found." in result.output


def test_airports_by_city_json_output(run_cli, backend):
    backend.reply(
        200,
        [{"id": 3, "code": "YHZ", "city": {"id": 300, "name": "Halifax"}}],
    )

    result = run_cli("--json-output", "airports", "--city-id", "300")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload[0]["code"] == "YHZ"
    assert payload[0]["city"]["name"] == "Halifax"
    assert backend.last_request.url.params["cityId"] == "300"


def test_airports_by_aircraft(run_cli, backend):
    backend.reply(200, [{"id": 4, "code": "YYC"}])

    result = run_cli("airports", "--aircraft-id", "42")

    assert result.exit_code == 0, result.output
    assert "YYC" in result.output
    assert "unknown city" in result.output
    assert backend.last_request.url.params["aircraftId"] == "42"


def test_city_and_aircraft_filters_are_exclusive(run_cli, backend):
    result = run_cli("airports", "--city-id", "1", "--aircraft-id", "2")

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output
    assert backend.requests == []
