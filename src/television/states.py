"""Television states — each one owns the behaviour of the set while active."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.core.config import TelevisionConfig

if TYPE_CHECKING:
    from src.television.television import Television


class TelevisionState(ABC):
    """Behaviour of a television for one state.

    A state may ask its television to install a successor state.  The
    successor is fully built before it is handed over.
    """

    def __init__(self, config: TelevisionConfig | None = None) -> None:
        self._config = config or TelevisionConfig()
        self.television: Television | None = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(powered={self.powered},"
            f" volume={self.volume}, muted={self.muted})"
        )

    # Off defaults; powered states override all three.

    @property
    def powered(self) -> bool:
        return False

    @property
    def volume(self) -> int | None:
        return None

    @property
    def muted(self) -> bool | None:
        return None

    @abstractmethod
    def increase_volume(self) -> None: ...

    @abstractmethod
    def lower_volume(self) -> None: ...

    @abstractmethod
    def toggle_mute(self) -> None: ...

    @abstractmethod
    def toggle_power(self) -> None: ...

    def _set_state(self, state: TelevisionState) -> None:
        # Detached states have nowhere to transition to.
        if self.television is not None:
            self.television.set_state(state)


class TelevisionOffState(TelevisionState):
    """Only the power button does anything."""

    def increase_volume(self) -> None:
        pass

    def lower_volume(self) -> None:
        pass

    def toggle_mute(self) -> None:
        pass

    def toggle_power(self) -> None:
        self._set_state(TelevisionOnState(config=self._config))


class TelevisionOnState(TelevisionState):
    """Powered and audible; volume moves within the configured bounds."""

    def __init__(
        self,
        volume: int | None = None,
        config: TelevisionConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._volume = self._normalize(volume)
        self._muted = False

    @property
    def powered(self) -> bool:
        return True

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def muted(self) -> bool:
        return self._muted

    def _normalize(self, volume: int | None) -> int:
        # minimum <= (volume or initial) <= maximum
        if volume is None:
            volume = self._config.initial_volume
        return max(self._config.minimum_volume, min(self._config.maximum_volume, volume))

    def increase_volume(self) -> None:
        if self._volume < self._config.maximum_volume:
            self._volume += 1

    def lower_volume(self) -> None:
        if self._volume > self._config.minimum_volume:
            self._volume -= 1

    def toggle_mute(self) -> None:
        self._set_state(TelevisionMutedState(self._volume, config=self._config))

    def toggle_power(self) -> None:
        self._set_state(TelevisionOffState(config=self._config))


class TelevisionMutedState(TelevisionOnState):
    """Powered but silent.

    Adjusting the volume applies the change and unmutes in the same step.
    """

    def __init__(
        self,
        volume: int | None = None,
        config: TelevisionConfig | None = None,
    ) -> None:
        super().__init__(volume, config)
        self._muted = True

    def increase_volume(self) -> None:
        super().increase_volume()
        self.toggle_mute()

    def lower_volume(self) -> None:
        super().lower_volume()
        self.toggle_mute()

    def toggle_mute(self) -> None:
        self._set_state(TelevisionOnState(self._volume, config=self._config))
