"""Disc tag detection.

Recognizes disc/volume indicators such as "(Disc 2)", "CD1" or
"Disc Two" in file and directory names.
"""

from __future__ import annotations

import re
from collections.abc import Callable

_Rule = tuple[re.Pattern[str], Callable[[re.Match[str]], int]]

_SPELLED = (("one", 1), ("two", 2), ("three", 3))


def _captured(match: re.Match[str]) -> int:
    return int(match.group(1))


def _spelled_rules(template: str) -> tuple[_Rule, ...]:
    """One rule per spelled number, tried one, two, three."""
    return tuple(
        (re.compile(template.format(word)), lambda _match, number=number: number)
        for word, number in _SPELLED
    )


# Evaluated in order against the lower-cased text; the first rule that
# matches decides, even if a later rule would match more precisely.
_DISC_RULES: tuple[_Rule, ...] = (
    (re.compile(r"\(disc\s*(\d+)\)"), _captured),
    *_spelled_rules(r"\(disc\s*{}\)"),
    (re.compile(r"cd\s*(\d+)"), _captured),
    (re.compile(r"disc\s*(\d+)\."), _captured),
    (re.compile(r"disc\s*(\d+)$"), _captured),
    *_spelled_rules(r"disc {}"),
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# Spelled-out numbers count on their own, without a preceding disc/cd token.
_DISC_TOKENS = frozenset(
    ["disc", "disk", "cd"]
    + [f"{prefix}{n}" for prefix in ("disc", "disk", "cd") for n in range(1, 6)]
    + ["one", "two", "three", "four", "five"]
)


def detect_disc_number(text: str) -> int | None:
    """Return the disc number indicated by *text*, or None.

    Examples:
        >>> detect_disc_number("Album (Disc 2)")
        2
        >>> detect_disc_number("Album CD1")
        1
        >>> detect_disc_number("Single Album") is None
        True
    """
    lower = text.lower()
    for pattern, handler in _DISC_RULES:
        match = pattern.search(lower)
        if match:
            return handler(match)
    return None


def has_disc_tag(text: str) -> bool:
    """Return True if *text* already carries a disc indicator token."""
    tokens = _NON_ALNUM.sub(" ", text.lower()).split()
    return any(token in _DISC_TOKENS for token in tokens)
