"""Tests for fragment normalization."""

from core.text_normalizer import SOFT_HYPHEN, normalize, strip_soft_hyphens


def test_only_sequence_boundaries_are_trimmed():
    fragments = ["  a ", " b ", " c  "]
    assert normalize(fragments) == "a  b  c"


def test_interior_line_breaks_are_kept():
    fragments = ["\n  ein Satz,\n", "  der umbricht ", "\n"]
    assert normalize(fragments) == "ein Satz,\n  der umbricht"


def test_soft_hyphens_are_stripped_when_requested():
    assert normalize(["Bei\u00adspiel"], strip_soft_hyphens=True) == "Beispiel"
    assert normalize(["Bei\u00ad", "spiel"], strip_soft_hyphens=True) == "Beispiel"


def test_soft_hyphens_are_kept_by_default():
    assert normalize(["Bei\u00adspiel"]) == "Bei\u00adspiel"


def test_soft_hyphen_next_to_boundary_whitespace():
    assert normalize([" \u00ad", "Wort", "\u00ad "], strip_soft_hyphens=True) == "Wort"


def test_empty_sequence_is_empty_string():
    assert normalize([]) == ""
    assert normalize([], strip_soft_hyphens=True) == ""


def test_whitespace_only_fragments():
    assert normalize(["  ", "\n", "\t"]) == ""
    assert normalize(["   ", "Wort"]) == "Wort"


def test_normalize_is_idempotent():
    samples = [
        ["  a ", " b ", " c  "],
        ["\n\tZeile eins\n", "Zeile zwei  "],
        ["ohne Rand"],
        ["", "   ", ""],
    ]
    for fragments in samples:
        once = normalize(fragments)
        assert normalize([once]) == once


def test_accepts_generators():
    assert normalize(part for part in [" x", "y "]) == "xy"


def test_strip_soft_hyphens_single_string():
    assert strip_soft_hyphens(f"Schmet{SOFT_HYPHEN}ter{SOFT_HYPHEN}ling") == "Schmetterling"
