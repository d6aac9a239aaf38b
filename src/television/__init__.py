"""Television module — a state machine driving power, volume and mute."""

from src.television.states import (
    TelevisionMutedState,
    TelevisionOffState,
    TelevisionOnState,
    TelevisionState,
)
from src.television.television import Television
from src.television.types import TelevisionSnapshot

__all__ = [
    "Television",
    "TelevisionMutedState",
    "TelevisionOffState",
    "TelevisionOnState",
    "TelevisionSnapshot",
    "TelevisionState",
]
