"""Gift-exchange draw core: name extraction, rules and the sampling loop."""

from .engine import DrawResult, UnsatisfiableError, assign, build_candidate, draw
from .extractor import extract
from .models import Pairing, Participant
from .report import cycle_order, pairings_to_dicts, render_lines, render_text
from .rules import (
    RULES,
    BrokenCircle,
    FamilyPairing,
    FamilyToFamily,
    Rejection,
    SelfPairing,
    check_pairings,
)

__all__ = [
    "BrokenCircle",
    "DrawResult",
    "FamilyPairing",
    "FamilyToFamily",
    "Pairing",
    "Participant",
    "RULES",
    "Rejection",
    "SelfPairing",
    "UnsatisfiableError",
    "assign",
    "build_candidate",
    "check_pairings",
    "cycle_order",
    "draw",
    "extract",
    "pairings_to_dicts",
    "render_lines",
    "render_text",
]
