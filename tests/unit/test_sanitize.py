"""Unit tests for file and directory name sanitization."""

from __future__ import annotations

import pytest
from cuesplit.utils.sanitize import sanitize_dirname, sanitize_filename

FORBIDDEN = ':"/\\|?*<>'


# --- sanitize_filename ---


def test_filename_forbidden_chars_replaced() -> None:
    assert sanitize_filename("Track: One (Live)*.flac") == "Track - One (Live)-.flac"


def test_filename_dots_in_base_become_spaces() -> None:
    assert sanitize_filename("01. Track.Name.flac") == "01 Track Name.flac"


def test_filename_extension_preserved_verbatim() -> None:
    assert sanitize_filename("Song.FLAC") == "Song.FLAC"
    assert sanitize_filename("a:b.Mp3") == "a - b.Mp3"


def test_filename_without_extension() -> None:
    assert sanitize_filename("No Extension: Here") == "No Extension - Here"


def test_filename_substitution_table() -> None:
    assert sanitize_filename('a"b.flac') == "ab.flac"
    assert sanitize_filename("a/b.flac") == "a-b.flac"
    assert sanitize_filename("a\\b.flac") == "ab.flac"
    assert sanitize_filename("a|b.flac") == "a-b.flac"
    assert sanitize_filename("a?b.flac") == "a-b.flac"
    assert sanitize_filename("a<b>.flac") == "a(b(.flac"


def test_filename_whitespace_collapsed_and_trimmed() -> None:
    assert sanitize_filename("  01   Intro \t .flac") == "01 Intro.flac"


def test_filename_empty_base_tolerated() -> None:
    assert sanitize_filename(".flac") == ".flac"
    assert sanitize_filename("...flac") == ".flac"


@pytest.mark.parametrize(
    "name",
    [
        'What? "Now" / <Then> | *.flac',
        "A:B:C\\D.ogg",
        "01. Who?.Why*.mp3",
    ],
)
def test_filename_never_contains_forbidden_chars(name: str) -> None:
    base = sanitize_filename(name).rsplit(".", 1)[0]
    assert not any(c in base for c in FORBIDDEN)
    assert "." not in base


# --- sanitize_dirname ---


def test_dirname_separators_replaced() -> None:
    assert sanitize_dirname("AC/DC - Back\\In Black") == "AC-DC - Back-In Black"


def test_dirname_keeps_dots_and_colons() -> None:
    name = "Mr. Bungle - 1991 - Vol. 1: Live"
    assert sanitize_dirname(name) == name


def test_dirname_whitespace_collapsed() -> None:
    assert sanitize_dirname("  Artist   -  Album  ") == "Artist - Album"
