"""Tests for name extraction."""

from wichtel_core.extractor import extract
from wichtel_core.models import Participant


class TestExtract:
    def test_skips_malformed_line(self):
        result = extract("Alice Smith\nnotaname\nBob Jones")
        assert [(p.first_name, p.last_name) for p in result] == [
            ("Alice", "Smith"),
            ("Bob", "Jones"),
        ]

    def test_indexes_follow_output_order(self):
        result = extract("Alice Smith\n\n???\nBob Jones\nCara Lee")
        assert [p.index for p in result] == [0, 1, 2]

    def test_empty_text(self):
        assert extract("") == []
        assert extract("\n\n") == []

    def test_only_first_two_tokens_are_used(self):
        (p,) = extract("Anna Maria Meier")
        assert p == Participant("Anna", "Maria", 0)

    def test_leading_noise_is_ignored(self):
        (p,) = extract("  - Omer Yilmaz")
        assert p.first_name == "Omer"
        assert p.last_name == "Yilmaz"

    def test_tab_separator(self):
        (p,) = extract("Lukas\tSchmidt")
        assert p.full_name == "Lukas Schmidt"

    def test_unicode_names(self):
        (p,) = extract("Jürgen Müller")
        assert p.family == "Müller"

    def test_namesakes_stay_distinct(self):
        a, b = extract("Anna Meier\nAnna Meier")
        assert a.full_name == b.full_name
        assert a != b

    def test_windows_line_endings(self):
        result = extract("Alice Smith\r\nBob Jones\r\n")
        assert [p.last_name for p in result] == ["Smith", "Jones"]

    def test_only_newline_ends_a_line(self):
        (p,) = extract("Alice\x0cSmith")
        assert p.full_name == "Alice Smith"

    def test_unicode_line_separator_stays_in_line(self):
        result = extract("Alice Smith\u2028Bob Jones\x85\nCara Lee")
        assert [p.full_name for p in result] == ["Alice Smith", "Cara Lee"]
