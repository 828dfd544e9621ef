"""JSON codec between response bodies and lists of domain entities."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

from .converters import CONVERTERS
from .errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

__all__ = ["ParseError", "dump", "parse"]


M = TypeVar("M", bound=BaseModel)


def parse(body: str | bytes, entity: type[M]) -> list[M]:
    """Decode a JSON array body into a list of *entity*, preserving order.

    ``[]`` yields an empty list.  Any malformed JSON, non-array body or
    invalid element raises :class:`ParseError` for the whole call; no
    partial list is ever returned.
    """
    try:
        convert = CONVERTERS[entity]
    except KeyError:
        msg = f"No converter registered for {entity.__name__}"
        raise TypeError(msg) from None

    try:
        raw: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        msg = f"Malformed JSON body: {exc}"
        raise ParseError(msg) from exc

    if not isinstance(raw, list):
        msg = f"Expected a JSON array of {entity.__name__}, got {type(raw).__name__}"
        raise ParseError(msg)

    entities: list[M] = []
    for index, item in enumerate(raw):
        try:
            entities.append(convert(item))  # type: ignore[arg-type]
        except ParseError as exc:
            msg = f"Element {index}: {exc}"
            raise ParseError(msg) from exc

    logger.debug("Decoded %d %s entities", len(entities), entity.__name__)
    return entities


def dump(entities: Sequence[BaseModel]) -> str:
    """Serialize entities to a JSON array using the service's wire names."""
    return json.dumps(
        [e.model_dump(mode="json", by_alias=True) for e in entities],
        indent=2,
    )
