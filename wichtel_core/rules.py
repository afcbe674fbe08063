"""Validation rules for candidate pairing sets.

Each rule returns ``None`` when the pairing set satisfies it, or a
``Rejection`` describing the first violation found. Rejections are plain
values: the draw loop counts and logs them, then tries again.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .models import Pairing, Participant

logger = logging.getLogger(__name__)

# ---- Rejection reasons -----------------------------------------------------

REJECTION_REASONS = frozenset({
    "self_pairing",
    "family_pairing",
    "broken_circle",
    "family_to_family",
})


@dataclass(frozen=True)
class Rejection(ABC):
    reason = ""

    @property
    @abstractmethod
    def message(self) -> str:
        ...

    def to_dict(self) -> dict[str, str]:
        return {"reason": self.reason, "message": self.message}


@dataclass(frozen=True)
class SelfPairing(Rejection):
    participant: Participant
    reason = "self_pairing"

    @property
    def message(self) -> str:
        p = self.participant
        return f"Conflict: Itself with {p.first_name}, {p.last_name}"


@dataclass(frozen=True)
class FamilyPairing(Rejection):
    giver: Participant
    receiver: Participant
    reason = "family_pairing"

    @property
    def message(self) -> str:
        return f"Conflict: Family {self.giver.full_name} with {self.receiver.full_name}"


@dataclass(frozen=True)
class BrokenCircle(Rejection):
    found: int
    expected: int
    reason = "broken_circle"

    @property
    def message(self) -> str:
        return (
            "Conflict: Should have one large circle, "
            f"but has len {self.found}/{self.expected}"
        )


@dataclass(frozen=True)
class FamilyToFamily(Rejection):
    giver_family: str
    receiver_family: str
    count: int
    reason = "family_to_family"

    @property
    def message(self) -> str:
        return "Conflict: family to family"


# ---- Rules -----------------------------------------------------------------

def check_self_pairing(pairings: Sequence[Pairing]) -> Optional[Rejection]:
    for p in pairings:
        if p.giver == p.receiver:
            return SelfPairing(p.giver)
    return None


def check_family(pairings: Sequence[Pairing]) -> Optional[Rejection]:
    for p in pairings:
        if p.giver.family == p.receiver.family:
            return FamilyPairing(p.giver, p.receiver)
    return None


def check_full_circle(pairings: Sequence[Pairing]) -> Optional[Rejection]:
    """Walk giver -> receiver from the first giver until back at the start.

    The walk must take exactly ``len(pairings)`` steps, otherwise the
    permutation splits into more than one cycle.

    Raises ValueError for an empty set or when a participant on the walk
    has no pairing as giver.
    """
    if not pairings:
        raise ValueError("cannot walk an empty pairing set")

    receiver_of = {p.giver: p.receiver for p in pairings}
    expected = len(pairings)
    start = pairings[0].giver
    current = start
    steps = 0
    while True:
        if current not in receiver_of:
            raise ValueError(f"{current.full_name} does not give to anyone")
        current = receiver_of[current]
        steps += 1
        if current == start or steps > expected:
            break

    if steps != expected:
        return BrokenCircle(found=steps, expected=expected)
    return None


def check_family_to_family(pairings: Sequence[Pairing]) -> Optional[Rejection]:
    counts = Counter(p.family_key for p in pairings)
    logger.debug("Family map: %s", dict(counts))
    for (giver_family, receiver_family), count in counts.items():
        if count > 1:
            return FamilyToFamily(giver_family, receiver_family, count)
    return None


RULES: tuple[Callable[[Sequence[Pairing]], Optional[Rejection]], ...] = (
    check_self_pairing,
    check_family,
    check_full_circle,
    check_family_to_family,
)


def check_pairings(pairings: Sequence[Pairing]) -> Optional[Rejection]:
    """Run every rule in order and return the first rejection."""
    for rule in RULES:
        rejection = rule(pairings)
        if rejection is not None:
            return rejection
    return None
