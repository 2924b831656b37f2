"""Unit tests for disc tag detection."""

from __future__ import annotations

import pytest
from cuesplit.cue.disc import detect_disc_number, has_disc_tag

# --- detect_disc_number ---


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Album (Disc 2)", 2),
        ("Album (disc 12)", 12),
        ("Album (Disc One)", 1),
        ("Album (disc two)", 2),
        ("Album (DISC THREE)", 3),
        ("Album CD1", 1),
        ("Album cd 2.flac", 2),
        ("Album Disc 3.flac", 3),
        ("Album - disc4", 4),
        ("Album Disc One.flac", 1),
        ("Album disc two bonus", 2),
    ],
)
def test_detect_disc_number(text: str, expected: int) -> None:
    assert detect_disc_number(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Single Album",
        "",
        "Album (Disc Four)",
        "Discography 1990",
        "Disc 2 Edition",
    ],
)
def test_detect_disc_number_absent(text: str) -> None:
    assert detect_disc_number(text) is None


def test_parenthesized_number_beats_cd_pattern() -> None:
    assert detect_disc_number("CD1 Box (Disc 3)") == 3


def test_cd_pattern_beats_trailing_disc() -> None:
    assert detect_disc_number("cd 5 - disc 2") == 5


def test_cd_inside_word_still_matches() -> None:
    # "abcd 7" contains "cd 7"; the rule order is kept as-is
    assert detect_disc_number("abcd 7") == 7


def test_spelled_parenthesized_tried_in_number_order() -> None:
    assert detect_disc_number("(Disc Three) (Disc One)") == 1
    assert detect_disc_number("(Disc Three) (Disc Two)") == 2


def test_spelled_bare_tried_in_number_order() -> None:
    assert detect_disc_number("disc three and disc one") == 1
    assert detect_disc_number("Disc Three, Disc Two") == 2


def test_numbered_disc_with_dot_beats_spelled() -> None:
    assert detect_disc_number("Disc One Disc 2.flac") == 2


# --- has_disc_tag ---


@pytest.mark.parametrize(
    "text",
    [
        "Artist - 2020 - Album (Disc 1)",
        "Album CD2",
        "Album [disk3]",
        "Album cd",
        "Box Set - Disc",
        "Album Disc Two",
        "Four Seasons",
        "One Night Only",
    ],
)
def test_has_disc_tag_true(text: str) -> None:
    assert has_disc_tag(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "Laibach - 1992 - Kapital",
        "Discography",
        "cd6",
        "disc10",
        "Someone",
        "",
    ],
)
def test_has_disc_tag_false(text: str) -> None:
    assert has_disc_tag(text) is False


def test_has_disc_tag_splits_on_punctuation() -> None:
    assert has_disc_tag("Album_-_CD1") is True
    assert has_disc_tag("Album.Disc.1") is True
