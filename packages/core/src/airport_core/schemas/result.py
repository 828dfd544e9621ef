"""Outcome of a single REST fetch, before it is flattened for callers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FetchResult(BaseModel):
    """Result of one request/response/decode cycle.

    ``items`` is always a list; on failure it is empty and ``error``
    describes which stage failed.
    """

    path: str
    items: list[Any] = Field(default_factory=list)
    status_code: int | None = None
    duration_ms: int = 0
    error: str | None = None
    success: bool = True
