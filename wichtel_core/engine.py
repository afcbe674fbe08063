"""Rejection-sampling draw of a single-cycle gift assignment.

Every attempt shuffles the participants uniformly, pairs the original order
with the shuffled order and validates the candidate against ``RULES``. The
first candidate passing all rules is returned.

Without ``max_attempts`` the loop is unbounded: a group whose rules cannot
be satisfied (e.g. two members of the same family and nobody else) never
returns.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from .models import Pairing, Participant
from .report import pairings_to_dicts
from .rules import REJECTION_REASONS, Rejection, check_pairings

logger = logging.getLogger(__name__)

RejectCallback = Callable[[int, Rejection], None]


class UnsatisfiableError(RuntimeError):
    def __init__(self, attempts: int, rejections: Counter) -> None:
        self.attempts = attempts
        self.rejections = rejections
        summary = ", ".join(f"{k}={v}" for k, v in rejections.most_common()) or "none"
        super().__init__(f"No valid assignment after {attempts} attempts ({summary})")


@dataclass
class DrawResult:
    pairings: list[Pairing]
    attempts: int
    rejections: Counter = field(default_factory=Counter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pairings": pairings_to_dicts(self.pairings),
            "attempts": self.attempts,
            "rejections": {r: self.rejections.get(r, 0) for r in sorted(REJECTION_REASONS)},
        }


def build_candidate(participants: Sequence[Participant], rng: random.Random) -> list[Pairing]:
    shuffled = list(participants)
    rng.shuffle(shuffled)
    return [Pairing(giver, receiver) for giver, receiver in zip(participants, shuffled)]


def _check_participants(participants: Sequence[Participant]) -> None:
    if not participants:
        raise ValueError("at least one participant is required")
    seen: set[Participant] = set()
    for p in participants:
        if p in seen:
            raise ValueError(f"duplicate participant: {p.full_name} (index {p.index})")
        seen.add(p)


def draw(
    participants: Sequence[Participant],
    *,
    rng: random.Random | None = None,
    max_attempts: int | None = None,
    on_reject: Optional[RejectCallback] = None,
) -> DrawResult:
    """Sample candidates until one passes every rule.

    ``rng`` defaults to a fresh process-seeded ``random.Random``. When
    ``max_attempts`` is given, UnsatisfiableError is raised once it is used up.
    """
    _check_participants(participants)
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if rng is None:
        rng = random.Random()

    rejections: Counter = Counter()
    attempt = 0
    while max_attempts is None or attempt < max_attempts:
        attempt += 1
        candidate = build_candidate(participants, rng)
        rejection = check_pairings(candidate)
        if rejection is None:
            logger.info(
                "Accepted assignment for %d participants after %d attempts",
                len(participants), attempt,
            )
            return DrawResult(pairings=candidate, attempts=attempt, rejections=rejections)

        rejections[rejection.reason] += 1
        logger.debug("Attempt %d rejected: %s", attempt, rejection.message)
        if on_reject is not None:
            on_reject(attempt, rejection)

    raise UnsatisfiableError(attempt, rejections)


def assign(
    participants: Sequence[Participant],
    *,
    rng: random.Random | None = None,
    max_attempts: int | None = None,
    on_reject: Optional[RejectCallback] = None,
) -> list[Pairing]:
    return draw(
        participants, rng=rng, max_attempts=max_attempts, on_reject=on_reject,
    ).pairings
