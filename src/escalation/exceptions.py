"""Escalation chain exceptions."""

from __future__ import annotations


class EscalationError(Exception):
    """Base exception for escalation chain errors."""


class EscalationCycleError(EscalationError):
    """An escalation link would make the chain loop back on itself."""


class ProblemAlreadySolvedError(EscalationError):
    """A problem can only be solved once."""


class TierAlreadyLinkedError(EscalationError):
    """A tier joining a chain already escalates somewhere else."""
