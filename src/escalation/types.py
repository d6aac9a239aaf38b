"""Domain types for the support escalation chain."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from src.escalation.exceptions import ProblemAlreadySolvedError

if TYPE_CHECKING:
    from src.escalation.support import CustomerSupport


class Severity(IntEnum):
    """Problem severity — ordered so comparisons work naturally."""

    NO_PROBLEM = 0
    SIMPLE = 1
    TROUBLESOME = 2
    URGENT = 3
    CRITICAL = 4

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Coerce a member, an int value or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace(" ", "_").replace("-", "_")
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown severity {value!r}") from None
        return cls(value)


class Problem:
    """A support request travelling along the escalation chain.

    Starts unresolved.  ``solve_by`` may be called exactly once; the
    resolving tier is then fixed for the lifetime of the problem.
    """

    def __init__(self, severity: Severity) -> None:
        self._severity = Severity.parse(severity)
        self._solved_by: CustomerSupport | None = None
        self._path: list[str] = []

    def __repr__(self) -> str:
        solver = self._solved_by.name if self._solved_by is not None else None
        return f"Problem(severity={self._severity.name}, solved_by={solver!r})"

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def solved(self) -> bool:
        return self._solved_by is not None

    @property
    def solved_by(self) -> CustomerSupport | None:
        return self._solved_by

    @property
    def escalation_path(self) -> tuple[str, ...]:
        """Names of the tiers that examined this problem, in order."""
        return tuple(self._path)

    def record_visit(self, support: CustomerSupport) -> None:
        """Note that *support* examined the problem.

        Raises:
            ProblemAlreadySolvedError: if the problem was already solved.
        """
        if self._solved_by is not None:
            raise ProblemAlreadySolvedError(
                f"{self!r} is solved; {support.name!r} cannot examine it"
            )
        self._path.append(support.name)

    def solve_by(self, support: CustomerSupport) -> None:
        """Mark the problem as solved by *support*.

        Raises:
            ProblemAlreadySolvedError: if the problem was already solved.
        """
        if self._solved_by is not None:
            raise ProblemAlreadySolvedError(
                f"{self!r} cannot be solved again by {support.name!r}"
            )
        self._solved_by = support
