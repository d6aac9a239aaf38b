"""Customer support tiers — the handlers of the escalation chain."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from src.escalation.exceptions import EscalationCycleError, ProblemAlreadySolvedError
from src.escalation.types import Problem, Severity

logger = structlog.get_logger(__name__)


class CustomerSupport:
    """A support tier that solves the severities it handles and escalates the rest.

    Subclasses fix their capabilities through ``handled_severities``; a
    generic tier can be given its own set at construction.  Each tier holds
    at most one non-owning link to the tier it escalates to.
    """

    handled_severities: frozenset[Severity] = frozenset()

    def __init__(
        self,
        name: str | None = None,
        severities: Iterable[Severity] | None = None,
    ) -> None:
        self._name = name or type(self).__name__
        if severities is not None:
            self.handled_severities = frozenset(Severity.parse(s) for s in severities)
        self._escalation: CustomerSupport | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"

    # ── Properties ────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def escalation(self) -> CustomerSupport | None:
        """The tier problems are escalated to, if any."""
        return self._escalation

    # ── Wiring ───────────────────────────────────────────────────

    def iter_escalations(self) -> Iterator[CustomerSupport]:
        """Yield this tier followed by every tier it escalates to."""
        support: CustomerSupport | None = self
        while support is not None:
            yield support
            support = support._escalation

    def set_escalation(self, escalated_support: CustomerSupport | None) -> None:
        """Link this tier to *escalated_support*, or clear the link with None.

        Raises:
            EscalationCycleError: if *escalated_support* already escalates
                back to this tier (or is this tier).
        """
        if escalated_support is not None:
            for support in escalated_support.iter_escalations():
                if support is self:
                    logger.warning(
                        "escalation_cycle_rejected",
                        support=self._name,
                        escalated_support=escalated_support.name,
                    )
                    raise EscalationCycleError(
                        f"Escalating {self._name!r} to {escalated_support.name!r}"
                        " would create a cycle"
                    )
        self._escalation = escalated_support

    # ── Handling ─────────────────────────────────────────────────

    def can_solve(self, problem: Problem) -> bool:
        return problem.severity in self.handled_severities

    def solve_problem(self, problem: Problem) -> CustomerSupport | None:
        """Pass *problem* along the chain starting at this tier.

        Returns the tier that solved it, or None when no tier could.  An
        unsolved problem is a normal outcome.

        Raises:
            ProblemAlreadySolvedError: if *problem* was solved before; the
                problem is left untouched.
        """
        if problem.solved:
            raise ProblemAlreadySolvedError(
                f"{problem!r} cannot be submitted to {self._name!r} again"
            )
        for support in self.iter_escalations():
            problem.record_visit(support)
            if support.can_solve(problem):
                problem.solve_by(support)
                logger.info(
                    "problem_solved",
                    severity=problem.severity.name,
                    solved_by=support.name,
                    path=problem.escalation_path,
                )
                return support
            if support._escalation is not None:
                logger.debug(
                    "problem_escalated",
                    severity=problem.severity.name,
                    from_support=support.name,
                    to_support=support._escalation.name,
                )

        logger.info(
            "problem_unresolved",
            severity=problem.severity.name,
            path=problem.escalation_path,
        )
        return None


class FrontDesk(CustomerSupport):
    """First line — solves trivial problems."""

    handled_severities = frozenset({Severity.NO_PROBLEM, Severity.SIMPLE})


class Lead(CustomerSupport):
    handled_severities = frozenset({Severity.TROUBLESOME})


class Engineer(CustomerSupport):
    handled_severities = frozenset({Severity.CRITICAL})


class Manager(CustomerSupport):
    handled_severities = frozenset({Severity.URGENT})
