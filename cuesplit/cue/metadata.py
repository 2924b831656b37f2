"""CUE sheet metadata reader.

Only the album-level fields needed to name an output folder are read:
PERFORMER, the first TITLE and the DATE. Each field is found by its own
first-match scan over the sheet's lines; there is no full CUE grammar.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from cuesplit.exceptions import CueReadError

logger = logging.getLogger(__name__)

DEFAULT_ARTIST = "Unknown Artist"
DEFAULT_ALBUM = "Unknown Album"

_PERFORMER = re.compile(r'^\s*PERFORMER\s*"(.*)"')
# The first TITLE wins, even when a track TITLE precedes the album TITLE.
_TITLE = re.compile(r'^\s*TITLE\s*"(.*)"')
_DATE = re.compile(r"^\s*(?:REM\s+DATE|DATE)\s+\d{4}")
_YEAR = re.compile(r"\d{4}")
_TRACK = re.compile(r"^\s*TRACK\s\d{2}\s+AUDIO")

# UTF-8 (with or without BOM), then CP1252, then Latin-1 which accepts
# any byte sequence.
_FALLBACK_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


@dataclass(frozen=True)
class CueMetadata:
    """Album-level fields read from one CUE sheet."""

    artist: str | None = None
    album: str | None = None
    year: str | None = None
    track_count: int = 0

    @property
    def artist_or_default(self) -> str:
        return self.artist or DEFAULT_ARTIST

    @property
    def album_or_default(self) -> str:
        return self.album or DEFAULT_ALBUM


def _read_lines(path: Path, encoding: str | None) -> list[str]:
    """Read a cue file with encoding fallback."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise CueReadError(path, e.strerror or str(e)) from e

    if encoding is not None:
        try:
            return raw.decode(encoding).splitlines()
        except (UnicodeDecodeError, LookupError) as e:
            raise CueReadError(path, f"cannot decode with encoding '{encoding}': {e}") from e

    for enc in _FALLBACK_ENCODINGS:
        try:
            return raw.decode(enc).splitlines()
        except UnicodeDecodeError:
            continue

    raise CueReadError(path, "failed with UTF-8, CP1252, and Latin-1 encodings")


def _first_quoted(pattern: re.Pattern[str], lines: list[str]) -> str | None:
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return None


def _first_year(lines: list[str]) -> str | None:
    for line in lines:
        if _DATE.match(line):
            return _YEAR.search(line).group(0)
    return None


def read_cue_metadata(cue_path: str | Path, encoding: str | None = None) -> CueMetadata:
    """Read artist, album, year and track count from a CUE sheet.

    Args:
        cue_path: Path to the .cue file.
        encoding: Character encoding. If None, tries UTF-8, CP1252 then Latin-1.

    Returns:
        CueMetadata with absent fields left as None (empty values count
        as absent).

    Raises:
        CueReadError: If the file cannot be read or decoded.
    """
    path = Path(cue_path)
    lines = _read_lines(path, encoding)

    metadata = CueMetadata(
        artist=_first_quoted(_PERFORMER, lines) or None,
        album=_first_quoted(_TITLE, lines) or None,
        year=_first_year(lines),
        track_count=sum(1 for line in lines if _TRACK.match(line)),
    )
    logger.debug("Metadata from %s: %s", path.name, metadata)
    return metadata
