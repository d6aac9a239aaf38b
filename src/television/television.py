"""Television — the context object that delegates every action to its state."""

from __future__ import annotations

import threading

import structlog

from src.core.config import TelevisionConfig
from src.television.states import TelevisionOffState, TelevisionState
from src.television.types import TelevisionSnapshot

logger = structlog.get_logger(__name__)


class Television:
    """A television whose behaviour is entirely defined by its current state.

    Starts switched off.  Actions are total: anything that makes no sense in
    the current state is ignored.  A re-entrant lock serialises actions so a
    state can install its successor while its own action is still running.
    """

    INITIAL_VOLUME = 2
    MINIMUM_VOLUME = 0
    MAXIMUM_VOLUME = 10

    def __init__(self, config: TelevisionConfig | None = None) -> None:
        self._config = config or TelevisionConfig(
            initial_volume=self.INITIAL_VOLUME,
            minimum_volume=self.MINIMUM_VOLUME,
            maximum_volume=self.MAXIMUM_VOLUME,
        )
        self._lock = threading.RLock()
        self._state: TelevisionState = TelevisionOffState(config=self._config)
        self._state.television = self

    # ── Properties ────────────────────────────────────────────────

    @property
    def config(self) -> TelevisionConfig:
        return self._config

    @property
    def state(self) -> TelevisionState:
        return self._state

    @property
    def powered(self) -> bool:
        return self._state.powered

    @property
    def volume(self) -> int | None:
        return self._state.volume

    @property
    def muted(self) -> bool | None:
        return self._state.muted

    def snapshot(self) -> TelevisionSnapshot:
        """Consistent copy of the current state."""
        with self._lock:
            state = self._state
            return TelevisionSnapshot(
                state=type(state).__name__,
                powered=state.powered,
                volume=state.volume,
                muted=state.muted,
            )

    # ── Actions ──────────────────────────────────────────────────

    def toggle_power(self) -> None:
        with self._lock:
            self._state.toggle_power()

    def increase_volume(self) -> None:
        with self._lock:
            self._state.increase_volume()

    def lower_volume(self) -> None:
        with self._lock:
            self._state.lower_volume()

    def toggle_mute(self) -> None:
        with self._lock:
            self._state.toggle_mute()

    # ── State mutation ───────────────────────────────────────────

    def set_state(self, state: TelevisionState) -> None:
        """Install *state* as the active state.

        Re-installing the active state is a no-op.
        """
        with self._lock:
            if state is self._state:
                return
            previous = self._state
            state.television = self
            self._state = state
            previous.television = None
        logger.debug(
            "television_state_changed",
            from_state=type(previous).__name__,
            to_state=type(state).__name__,
            volume=state.volume,
            muted=state.muted,
        )
