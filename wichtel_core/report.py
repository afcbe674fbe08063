"""Rendering helpers for an accepted pairing set."""

from __future__ import annotations

from typing import Any, Sequence

from .models import Pairing, Participant


def render_lines(pairings: Sequence[Pairing]) -> list[str]:
    return [f"{p.giver.full_name} gives to {p.receiver.full_name}" for p in pairings]


def render_text(pairings: Sequence[Pairing]) -> str:
    return "\n".join(["Final Assignments:", *render_lines(pairings)])


def pairings_to_dicts(pairings: Sequence[Pairing]) -> list[dict[str, Any]]:
    return [p.to_dict() for p in pairings]


def cycle_order(pairings: Sequence[Pairing]) -> list[Participant]:
    """Participants in gift-giving order, starting with the first giver.

    Stops when the walk returns to the start, so a broken set yields only
    the first cycle.
    """
    if not pairings:
        return []
    receiver_of = {p.giver: p.receiver for p in pairings}
    start = pairings[0].giver
    order = [start]
    current = receiver_of.get(start)
    while current is not None and current != start and len(order) < len(pairings):
        order.append(current)
        current = receiver_of.get(current)
    return order
