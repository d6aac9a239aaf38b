#!/usr/bin/env python3
"""Demo entrypoint — walks the escalation chain and the television through
their reference scenarios and logs every observed step.

Usage::

    # Run both scenarios with default config
    python scripts/demo.py

    # Only the escalation chain, human-readable output
    python scripts/demo.py --scenario chain --log-format console

    # Custom config file, show every escalation hop
    python scripts/demo.py --config config/settings.yaml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import os
import sys

# Ensure project root is on sys.path so `src` is importable.
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

import structlog

from src.core.config import Settings, load_settings
from src.core.logging import setup_logging
from src.escalation.chain import EscalationChain
from src.escalation.types import Problem, Severity
from src.television.television import Television

logger = structlog.get_logger(__name__)


def run_chain(settings: Settings) -> list[Problem]:
    """Submit one problem of every severity to the configured chain."""
    chain = EscalationChain.from_config(settings.escalation)
    logger.info("chain_built", tiers=chain.names)

    problems = []
    for severity in Severity:
        problem = Problem(severity)
        solver = chain.submit(problem)
        logger.info(
            "chain_result",
            severity=severity.name,
            solved=problem.solved,
            solved_by=solver.name if solver else None,
            path=problem.escalation_path,
        )
        problems.append(problem)
    return problems


def run_television(settings: Settings) -> Television:
    """Drive a television through power, volume and mute changes."""
    television = Television(settings.television)
    steps = [
        ("toggle_power", 1),
        ("lower_volume", 3),
        ("increase_volume", 3),
        ("toggle_mute", 1),
        ("increase_volume", 1),
        ("toggle_power", 1),
    ]

    logger.info("television_step", action="initial", **television.snapshot().model_dump())
    for action, times in steps:
        for _ in range(times):
            getattr(television, action)()
        logger.info(
            "television_step",
            action=action,
            times=times,
            **television.snapshot().model_dump(),
        )
    return television


def run(args: argparse.Namespace) -> int:
    """Run the selected scenarios."""
    settings = load_settings(args.config)
    setup_logging(level=args.log_level, fmt=args.log_format)

    if args.scenario in ("chain", "all"):
        problems = run_chain(settings)
        unresolved = [p.severity.name for p in problems if not p.solved]
        if unresolved:
            logger.warning("chain_unresolved_severities", severities=unresolved)

    if args.scenario in ("television", "all"):
        run_television(settings)

    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run the escalation chain and television demos.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override: DEBUG, INFO, WARNING, ERROR",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Log renderer override",
    )
    parser.add_argument(
        "--scenario",
        default="all",
        choices=["chain", "television", "all"],
        help="Which demo to run (default: all)",
    )
    args = parser.parse_args(argv)

    code = run(args)
    sys.exit(code)


if __name__ == "__main__":
    main()
