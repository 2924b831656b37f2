"""Audio/CUE pair discovery.

Finds single-file album images in a directory tree and matches each to
its CUE sheet. For ``File.ext`` the sheet is looked up as, in order:

1. ``File.ext.cue``
2. ``File.cue``
3. ``File.cue`` with a trailing ``.cue`` segment of the stem stripped
   (``Album.cue.flac`` -> ``Album.cue``)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

# Recognized source audio extensions (lower-case, no dot)
AUDIO_EXTENSIONS = frozenset({"flac", "ape", "wav", "wv", "tta", "mp3", "ogg"})

CUE_SUFFIX = ".cue"


@dataclass(frozen=True)
class AlbumPair:
    """An audio image and the CUE sheet describing it."""

    audio_path: Path
    cue_path: Path
    audio_extension: str

    @property
    def audio_dir(self) -> Path:
        return self.audio_path.parent


def audio_extension(path: Path) -> str:
    """Lower-case extension of *path* without the dot."""
    return path.suffix[1:].lower()


def is_audio_file(path: Path) -> bool:
    return audio_extension(path) in AUDIO_EXTENSIONS


def cue_candidates(audio_path: Path) -> list[Path]:
    """Return the CUE paths to try for *audio_path*, most preferred first."""
    directory = audio_path.parent
    stem = audio_path.stem

    fallback_stem = stem
    if fallback_stem.endswith(CUE_SUFFIX):
        fallback_stem = fallback_stem[: -len(CUE_SUFFIX)]

    candidates: list[Path] = []
    for name in (audio_path.name, stem, fallback_stem):
        candidate = directory / f"{name}{CUE_SUFFIX}"
        if candidate not in candidates:
            candidates.append(candidate)
    return candidates


def resolve_pair(audio_path: str | Path) -> AlbumPair | None:
    """Match an audio file to its CUE sheet.

    Args:
        audio_path: Path to a discovered audio file.

    Returns:
        AlbumPair for the first existing candidate, or None if the file
        should be skipped. Nothing on disk is modified either way.
    """
    audio_path = Path(audio_path)
    candidates = cue_candidates(audio_path)

    for candidate in candidates:
        if candidate.is_file():
            return AlbumPair(
                audio_path=audio_path,
                cue_path=candidate,
                audio_extension=audio_extension(audio_path),
            )

    logger.debug(
        "No matching cue for %s (tried %s)",
        audio_path,
        ", ".join(c.name for c in candidates),
    )
    return None


def find_audio_files(root: str | Path) -> Iterator[Path]:
    """Walk *root* recursively and yield supported audio files.

    Directories and files are visited in sorted order so repeated runs
    see the same sequence.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        dir_path = Path(dirpath)
        for filename in sorted(filenames):
            path = dir_path / filename
            if is_audio_file(path) and path.is_file():
                yield path
