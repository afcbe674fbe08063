"""Tests for rendering accepted pairings."""

import pytest

from wichtel_core.models import Pairing, Participant
from wichtel_core.report import cycle_order, pairings_to_dicts, render_lines, render_text

ALICE = Participant("Alice", "Smith", 0)
BOB = Participant("Bob", "Jones", 1)
CARA = Participant("Cara", "Lee", 2)


@pytest.fixture
def pairings():
    return [Pairing(ALICE, BOB), Pairing(BOB, CARA), Pairing(CARA, ALICE)]


class TestRender:
    def test_lines(self, pairings):
        assert render_lines(pairings) == [
            "Alice Smith gives to Bob Jones",
            "Bob Jones gives to Cara Lee",
            "Cara Lee gives to Alice Smith",
        ]

    def test_text_has_header(self, pairings):
        text = render_text(pairings)
        assert text.splitlines()[0] == "Final Assignments:"
        assert len(text.splitlines()) == 4

    def test_dicts(self, pairings):
        rows = pairings_to_dicts(pairings)
        assert rows[0] == {
            "giver": {"first_name": "Alice", "last_name": "Smith"},
            "receiver": {"first_name": "Bob", "last_name": "Jones"},
        }


class TestCycleOrder:
    def test_follows_the_circle(self):
        shuffled = [Pairing(ALICE, CARA), Pairing(BOB, ALICE), Pairing(CARA, BOB)]
        assert cycle_order(shuffled) == [ALICE, CARA, BOB]

    def test_empty(self):
        assert cycle_order([]) == []

    def test_broken_set_yields_first_cycle(self):
        dave = Participant("Dave", "Novak", 3)
        pairings = [Pairing(ALICE, BOB), Pairing(BOB, ALICE), Pairing(CARA, dave), Pairing(dave, CARA)]
        assert cycle_order(pairings) == [ALICE, BOB]
