"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, field_validator, model_validator

from src.escalation.types import Severity

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


class TierConfig(BaseModel):
    """A single support tier in the escalation chain."""

    name: str
    severities: list[Severity] = []

    @field_validator("severities", mode="before")
    @classmethod
    def _parse_severities(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [Severity.parse(v) for v in value]
        return value


class EscalationConfig(BaseModel):
    """Escalation chain configuration — tiers in escalation order."""

    tiers: list[TierConfig] = [
        TierConfig(
            name="front_desk",
            severities=[Severity.NO_PROBLEM, Severity.SIMPLE],
        ),
        TierConfig(name="lead", severities=[Severity.TROUBLESOME]),
        TierConfig(name="engineer", severities=[Severity.CRITICAL]),
        TierConfig(name="manager", severities=[Severity.URGENT]),
    ]


class TelevisionConfig(BaseModel):
    """Television volume bounds."""

    initial_volume: int = 2
    minimum_volume: int = 0
    maximum_volume: int = 10

    @model_validator(mode="after")
    def _check_bounds(self) -> TelevisionConfig:
        if not self.minimum_volume <= self.initial_volume <= self.maximum_volume:
            raise ValueError(
                "volume bounds must satisfy minimum <= initial <= maximum"
                f" (got {self.minimum_volume} <= {self.initial_volume}"
                f" <= {self.maximum_volume})"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["json", "console"] = "json"


class Settings(BaseModel):
    """Root settings container."""

    escalation: EscalationConfig = EscalationConfig()
    television: TelevisionConfig = TelevisionConfig()
    logging: LoggingConfig = LoggingConfig()


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file and cache globally.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.

    Returns:
        Parsed Settings instance.
    """
    global _settings  # noqa: PLW0603

    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    _settings = Settings(**data)
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
