"""Domain types for the television state machine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TelevisionSnapshot(BaseModel):
    """Read-only view of a television at one instant."""

    model_config = ConfigDict(frozen=True)

    state: str
    powered: bool
    volume: int | None = None
    muted: bool | None = None
