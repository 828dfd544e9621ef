"""Command-line front end for browsing the airport service."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

import click

from airport_client import codec
from airport_client.client import AirportRestClient
from airport_client.config import settings

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from pydantic import BaseModel

    from airport_core.schemas import Aircraft, Airport, Passenger

logger = logging.getLogger(__name__)


def _format_passenger(p: Passenger) -> str:
    birthday = p.birthday.isoformat() if p.birthday else "-"
    return (
        f"{p.id} | {p.full_name or '-'} | born {birthday} | "
        f"{p.phone_number or '-'} | {len(p.flights)} flight(s)"
    )


def _format_aircraft(a: Aircraft) -> str:
    return f"{a.id} | {a.tail_number or '-'} | {a.model or '-'}"


def _format_airport(a: Airport) -> str:
    where = "unknown city"
    if a.city is not None:
        where = ", ".join(part for part in (a.city.name, a.city.state) if part)
    return f"{a.id} | {a.code or '---'} | {a.name or '-'} | {where}"


def _print_results(
    label: str,
    items: Sequence[BaseModel],
    fmt: Callable[..., str],
    *,
    json_output: bool,
) -> None:
    if json_output:
        click.echo(codec.dump(items))
        return
    if not items:
        click.echo(f"No {label} found.")
        return
    click.echo(f"\nFound {len(items)} {label}:\n")
    for i, item in enumerate(items, 1):
        click.echo(f"  {i}. {fmt(item)}")


T = TypeVar("T")


def _run(fetch: Callable[[AirportRestClient], Awaitable[T]]) -> T:
    ctx = click.get_current_context()
    client = AirportRestClient(ctx.obj["base_url"])
    return asyncio.run(fetch(client))


@click.group()
@click.option("--base-url", default=None, help="Airport service base URL")
@click.option("--json-output", is_flag=True, help="Output as JSON")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, json_output: bool) -> None:
    """Airport service CLI."""
    logging.basicConfig(
        level=settings.log_level, format="%(levelname)s: %(message)s"
    )
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url or settings.base_url
    ctx.obj["json_output"] = json_output


@cli.command("passengers")
@click.pass_context
def list_passengers(ctx: click.Context) -> None:
    """List all passengers."""
    passengers = _run(lambda c: c.get_all_passengers())
    _print_results(
        "passengers",
        passengers,
        _format_passenger,
        json_output=ctx.obj["json_output"],
    )


@cli.command("aircraft")
@click.pass_context
def list_aircraft(ctx: click.Context) -> None:
    """List all aircraft."""
    aircraft = _run(lambda c: c.get_all_aircraft())
    _print_results(
        "aircraft", aircraft, _format_aircraft, json_output=ctx.obj["json_output"]
    )


@cli.command("airports")
@click.option("--city-id", type=int, default=None, help="Only airports in this city")
@click.option(
    "--aircraft-id", type=int, default=None, help="Only airports this aircraft uses"
)
@click.pass_context
def list_airports(
    ctx: click.Context, city_id: int | None, aircraft_id: int | None
) -> None:
    """List airports, optionally filtered by city or aircraft."""
    if city_id is not None and aircraft_id is not None:
        msg = "--city-id and --aircraft-id are mutually exclusive"
        raise click.UsageError(msg)

    if city_id is not None:
        airports = _run(lambda c: c.get_airports_by_city_id(city_id))
    elif aircraft_id is not None:
        airports = _run(lambda c: c.get_airports_by_aircraft(aircraft_id))
    else:
        airports = _run(lambda c: c.get_all_airports())

    logger.debug("Rendering %d airport(s)", len(airports))
    _print_results(
        "airports", airports, _format_airport, json_output=ctx.obj["json_output"]
    )


if __name__ == "__main__":
    cli()
