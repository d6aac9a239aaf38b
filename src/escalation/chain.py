"""EscalationChain — owns an ordered list of support tiers and links them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import structlog

from src.escalation.exceptions import EscalationCycleError, TierAlreadyLinkedError
from src.escalation.support import CustomerSupport, Engineer, FrontDesk, Lead, Manager
from src.escalation.types import Problem, Severity

if TYPE_CHECKING:
    from src.core.config import EscalationConfig

logger = structlog.get_logger(__name__)


class EscalationChain:
    """Ordered support tiers, each escalating to the next.

    The chain is built once and then treated as read-only; ``submit`` only
    mutates the problem it is given.  Tiers must not be relinked with
    ``set_escalation`` once they belong to a chain, or ``submit`` and
    ``resolver_for`` stop agreeing.
    """

    def __init__(self, tiers: Iterable[CustomerSupport] = ()) -> None:
        self._tiers: list[CustomerSupport] = []
        for tier in tiers:
            self.append(tier)

    @classmethod
    def from_config(cls, config: EscalationConfig) -> EscalationChain:
        """Build a chain of generic tiers from configuration."""
        return cls(
            CustomerSupport(name=tier.name, severities=tier.severities)
            for tier in config.tiers
        )

    def __len__(self) -> int:
        return len(self._tiers)

    def __iter__(self) -> Iterator[CustomerSupport]:
        return iter(self._tiers)

    def __repr__(self) -> str:
        return f"EscalationChain({' -> '.join(self.names)})"

    @property
    def head(self) -> CustomerSupport | None:
        return self._tiers[0] if self._tiers else None

    @property
    def names(self) -> list[str]:
        return [tier.name for tier in self._tiers]

    def append(self, tier: CustomerSupport) -> None:
        """Add *tier* at the end of the chain.

        Raises:
            EscalationCycleError: if *tier* is already part of the chain.
            TierAlreadyLinkedError: if *tier* already escalates to another tier.
        """
        if any(existing is tier for existing in self._tiers):
            raise EscalationCycleError(f"{tier.name!r} is already in the chain")
        if tier.escalation is not None:
            raise TierAlreadyLinkedError(
                f"{tier.name!r} already escalates to {tier.escalation.name!r}"
            )
        if self._tiers:
            self._tiers[-1].set_escalation(tier)
        self._tiers.append(tier)
        logger.debug("tier_appended", tier=tier.name, position=len(self._tiers) - 1)

    def resolver_for(self, severity: Severity) -> CustomerSupport | None:
        """Return the first tier able to solve *severity*, without side effects."""
        severity = Severity.parse(severity)
        for tier in self._tiers:
            if severity in tier.handled_severities:
                return tier
        return None

    def submit(self, problem: Problem) -> CustomerSupport | None:
        """Hand *problem* to the head of the chain.

        Returns the solving tier, or None if the chain is empty or no tier
        handles the problem's severity.
        """
        if self.head is None:
            logger.info("problem_unresolved", severity=problem.severity.name, path=())
            return None
        return self.head.solve_problem(problem)


def default_support_chain() -> EscalationChain:
    """FrontDesk -> Lead -> Engineer -> Manager."""
    return EscalationChain(
        [
            FrontDesk(name="front_desk"),
            Lead(name="lead"),
            Engineer(name="engineer"),
            Manager(name="manager"),
        ]
    )
