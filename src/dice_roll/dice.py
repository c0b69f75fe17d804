from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Iterable

from .models import DiceRequest, RollMode, RollOutcome, RollReport
from .parser import parse_requests

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> random.Random:
    """Return the random source for one run.

    Without a seed this is ``secrets.SystemRandom``; with a seed it is a
    plain ``random.Random`` so the run can be reproduced.
    """

    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


def roll_unit(request: DiceRequest, rng: random.Random) -> RollOutcome:
    r1 = rng.randint(1, request.sides)
    if request.mode is RollMode.NORMAL:
        return RollOutcome(sides=request.sides, mode=request.mode, kept=r1)

    r2 = rng.randint(1, request.sides)
    if request.mode is RollMode.ADVANTAGE:
        kept, dropped = max(r1, r2), min(r1, r2)
    else:
        kept, dropped = min(r1, r2), max(r1, r2)
    return RollOutcome(sides=request.sides, mode=request.mode, kept=kept, dropped=dropped)


def resolve_requests(requests: Iterable[DiceRequest], rng: random.Random) -> list[RollOutcome]:
    outcomes: list[RollOutcome] = []
    for request in requests:
        for _ in range(request.count):
            outcomes.append(roll_unit(request, rng))
        logger.debug("rolled %s", request.expression)
    return outcomes


def total_kept(outcomes: Iterable[RollOutcome]) -> int:
    return sum(o.kept for o in outcomes)


def roll_expressions(texts: Iterable[str], rng: random.Random | None = None) -> RollReport:
    """Parse and validate every expression, then roll. Raises DiceError for invalid input."""

    requests = parse_requests(texts)

    if rng is None:
        rng = make_rng()
    outcomes = resolve_requests(requests, rng)

    return RollReport(outcomes=tuple(outcomes), total=total_kept(outcomes))
