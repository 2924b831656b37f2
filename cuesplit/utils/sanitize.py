"""Filename and directory name sanitization.

Names produced here are safe on restrictive filesystems such as VFAT:
the characters ``: " / \\ | ? * < >`` never survive.
"""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")

# Applied in order to the base name only; the extension is kept verbatim.
_FILENAME_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    (":", " - "),
    ('"', ""),
    ("/", "-"),
    ("\\", ""),
    ("|", "-"),
    ("?", "-"),
    ("*", "-"),
    ("<", "("),
    (">", "("),
)


def _collapse_whitespace(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def sanitize_filename(name: str) -> str:
    """Make a file name safe while keeping its extension.

    Forbidden characters in the base name are substituted, every dot in
    the base becomes a space and whitespace is collapsed. The base may
    end up empty.

    Examples:
        >>> sanitize_filename("01. Track.Name.flac")
        '01 Track Name.flac'
        >>> sanitize_filename("Track: One (Live)*.flac")
        'Track - One (Live)-.flac'
    """
    if "." in name:
        base, ext = name.rsplit(".", 1)
        ext = "." + ext
    else:
        base, ext = name, ""

    for char, replacement in _FILENAME_SUBSTITUTIONS:
        base = base.replace(char, replacement)

    base = base.replace(".", " ")
    return _collapse_whitespace(base) + ext


def sanitize_dirname(name: str) -> str:
    """Replace path separators with ``-`` and collapse whitespace."""
    name = name.replace("/", "-").replace("\\", "-")
    return _collapse_whitespace(name)
