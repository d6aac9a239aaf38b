"""Tests for src/television/television.py — context behaviour and full scenario."""

from __future__ import annotations

import threading

import pytest
from pydantic import ValidationError

from src.core.config import TelevisionConfig
from src.television.states import (
    TelevisionMutedState,
    TelevisionOffState,
    TelevisionOnState,
)
from src.television.television import Television
from src.television.types import TelevisionSnapshot


def _assert_off(tv: Television) -> None:
    assert isinstance(tv.state, TelevisionOffState)
    assert tv.powered is False
    assert tv.volume is None
    assert tv.muted is None


# ── Initial state ─────────────────────────────────────────────


class TestInitialState:
    def test_starts_off(self) -> None:
        _assert_off(Television())

    def test_class_constants(self) -> None:
        assert Television.INITIAL_VOLUME == 2
        assert Television.MINIMUM_VOLUME == 0
        assert Television.MAXIMUM_VOLUME == 10

    def test_default_config_mirrors_constants(self) -> None:
        cfg = Television().config
        assert cfg.initial_volume == 2
        assert cfg.minimum_volume == 0
        assert cfg.maximum_volume == 10

    @pytest.mark.parametrize(
        "action", ["increase_volume", "lower_volume", "toggle_mute"]
    )
    def test_actions_ignored_while_off(self, action: str) -> None:
        tv = Television()
        getattr(tv, action)()
        _assert_off(tv)


# ── Scenario ──────────────────────────────────────────────────


class TestScenario:
    def test_full_walkthrough(self) -> None:
        tv = Television()
        _assert_off(tv)

        tv.toggle_power()
        assert isinstance(tv.state, TelevisionOnState)
        assert not isinstance(tv.state, TelevisionMutedState)
        assert tv.powered is True
        assert tv.volume == 2
        assert tv.muted is False

        for _ in range(3):
            tv.lower_volume()
        assert type(tv.state) is TelevisionOnState
        assert tv.volume == 0
        assert tv.muted is False

        for _ in range(3):
            tv.increase_volume()
        assert type(tv.state) is TelevisionOnState
        assert tv.volume == 3

        tv.toggle_mute()
        assert type(tv.state) is TelevisionMutedState
        assert tv.powered is True
        assert tv.volume == 3
        assert tv.muted is True

        tv.increase_volume()
        assert type(tv.state) is TelevisionOnState
        assert tv.volume == 4
        assert tv.muted is False

        tv.toggle_mute()
        tv.toggle_mute()
        assert type(tv.state) is TelevisionOnState
        assert tv.volume == 4
        assert tv.muted is False

        tv.toggle_power()
        _assert_off(tv)

    def test_power_cycle_resets_volume(self) -> None:
        tv = Television()
        tv.toggle_power()
        for _ in range(5):
            tv.increase_volume()
        assert tv.volume == 7

        tv.toggle_power()
        tv.toggle_power()
        assert tv.volume == 2

    def test_power_off_while_muted(self) -> None:
        tv = Television()
        tv.toggle_power()
        tv.toggle_mute()
        tv.toggle_power()
        _assert_off(tv)


# ── Bounds ────────────────────────────────────────────────────


class TestVolumeBounds:
    def test_increase_stops_at_maximum(self) -> None:
        tv = Television()
        tv.toggle_power()
        for _ in range(20):
            tv.increase_volume()
        assert tv.volume == 10
        tv.increase_volume()
        assert tv.volume == 10

    def test_lower_stops_at_minimum(self) -> None:
        tv = Television()
        tv.toggle_power()
        for _ in range(5):
            tv.lower_volume()
        assert tv.volume == 0

    def test_custom_bounds(self) -> None:
        tv = Television(TelevisionConfig(initial_volume=5, minimum_volume=4, maximum_volume=6))
        tv.toggle_power()
        assert tv.volume == 5
        for _ in range(3):
            tv.increase_volume()
        assert tv.volume == 6
        for _ in range(3):
            tv.lower_volume()
        assert tv.volume == 4

    def test_invalid_bounds_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Television(TelevisionConfig(initial_volume=12))


# ── set_state / snapshot ──────────────────────────────────────


class TestSetState:
    def test_installs_and_attaches_state(self) -> None:
        tv = Television()
        state = TelevisionOnState(7)
        tv.set_state(state)
        assert tv.state is state
        assert state.television is tv
        assert tv.volume == 7

    def test_reinstalling_active_state_keeps_it_attached(self) -> None:
        tv = Television()
        tv.set_state(tv.state)
        assert tv.state.television is tv

        tv.toggle_power()
        assert tv.powered is True
        tv.set_state(tv.state)
        tv.toggle_mute()
        assert type(tv.state) is TelevisionMutedState
        assert tv.state.television is tv

    def test_previous_state_detached(self) -> None:
        tv = Television()
        off = tv.state
        tv.toggle_power()
        assert off.television is None
        assert tv.state.television is tv

    def test_snapshot(self) -> None:
        tv = Television()
        tv.toggle_power()
        tv.toggle_mute()
        snap = tv.snapshot()
        assert snap == TelevisionSnapshot(
            state="TelevisionMutedState", powered=True, volume=2, muted=True
        )

    def test_snapshot_is_frozen_copy(self) -> None:
        tv = Television()
        snap = tv.snapshot()
        tv.toggle_power()
        assert snap.powered is False
        with pytest.raises(ValidationError):
            snap.powered = True  # type: ignore[misc]


class TestThreadSafety:
    def test_concurrent_volume_changes_stay_in_bounds(self) -> None:
        tv = Television()
        tv.toggle_power()

        def _spam(action: str) -> None:
            for _ in range(200):
                getattr(tv, action)()

        threads = [
            threading.Thread(target=_spam, args=(action,))
            for action in ("increase_volume", "lower_volume", "toggle_mute") * 3
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert tv.powered is True
        assert tv.volume is not None
        assert 0 <= tv.volume <= 10
        assert tv.state.television is tv
