"""Escalation module — customer support tiers chained by responsibility."""

from src.escalation.chain import EscalationChain, default_support_chain
from src.escalation.exceptions import (
    EscalationCycleError,
    EscalationError,
    ProblemAlreadySolvedError,
    TierAlreadyLinkedError,
)
from src.escalation.support import CustomerSupport, Engineer, FrontDesk, Lead, Manager
from src.escalation.types import Problem, Severity

__all__ = [
    "CustomerSupport",
    "Engineer",
    "EscalationChain",
    "EscalationCycleError",
    "EscalationError",
    "FrontDesk",
    "Lead",
    "Manager",
    "Problem",
    "ProblemAlreadySolvedError",
    "Severity",
    "TierAlreadyLinkedError",
    "default_support_chain",
]
