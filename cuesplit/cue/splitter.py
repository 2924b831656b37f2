"""External splitter and tagger delegation.

Lossless images (FLAC, APE, WAV, WavPack, TTA) are split with shnsplit
and re-encoded to FLAC; MP3 and Ogg images are cut losslessly with
mp3splt. Split tracks are tagged with cuetag when it is installed.
The only contract with these tools is that one file per track appears
in the work directory.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from cuesplit.cue.pairing import AlbumPair
from cuesplit.exceptions import MissingToolError, SplitError, TagError, UnsupportedFormatError

logger = logging.getLogger(__name__)

LOSSLESS_EXTENSIONS = frozenset({"flac", "ape", "wav", "wv", "tta"})
LOSSY_EXTENSIONS = frozenset({"mp3", "ogg"})

# shnsplit pipes each track through this encoder command
FLAC_ENCODER = "flac flac -V --best -o %f -"
SHNSPLIT_NAME_FORMAT = "%n %p - %t"
MP3SPLT_NAME_FORMAT = "@n. @p - @t"

TAGGER = "cuetag"

# Pregap tracks come out numbered 00 with "pregap" in the name
_PREGAP_PATTERNS = ("00.*pregap*", "00*pregap*")


def output_extension(extension: str) -> str:
    """Extension of the split tracks for a source of *extension*."""
    if extension in LOSSY_EXTENSIONS:
        return extension
    return "flac"


def output_pattern(extension: str) -> str:
    """Glob matching split tracks for a source of *extension*."""
    return f"*.{output_extension(extension)}"


def required_tools(extension: str) -> tuple[str, ...]:
    """External commands needed to split a source of *extension*.

    Raises:
        UnsupportedFormatError: If no splitter handles *extension*.
    """
    if extension in LOSSLESS_EXTENSIONS:
        return ("shnsplit", "flac")
    if extension in LOSSY_EXTENSIONS:
        return ("mp3splt",)
    raise UnsupportedFormatError(extension)


def check_tools_available(extension: str) -> None:
    """Ensure the splitter for *extension* is installed.

    Raises:
        UnsupportedFormatError: If no splitter handles *extension*.
        MissingToolError: If a required command is not on PATH.
    """
    for tool in required_tools(extension):
        if shutil.which(tool) is None:
            raise MissingToolError(tool)


def build_split_command(pair: AlbumPair, work_dir: Path) -> list[str]:
    """Build the splitter command line for *pair*.

    Raises:
        UnsupportedFormatError: If no splitter handles the pair's format.
    """
    ext = pair.audio_extension
    if ext in LOSSLESS_EXTENSIONS:
        return [
            "shnsplit",
            "-d",
            str(work_dir),
            "-f",
            str(pair.cue_path),
            "-o",
            FLAC_ENCODER,
            str(pair.audio_path),
            "-t",
            SHNSPLIT_NAME_FORMAT,
        ]
    if ext in LOSSY_EXTENSIONS:
        return [
            "mp3splt",
            "-d",
            str(work_dir),
            "-o",
            MP3SPLT_NAME_FORMAT,
            "-c",
            str(pair.cue_path),
            str(pair.audio_path),
        ]
    raise UnsupportedFormatError(ext)


def remove_pregap(work_dir: Path) -> list[Path]:
    """Delete pregap tracks from *work_dir* and return what was removed."""
    removed: list[Path] = []
    for pattern in _PREGAP_PATTERNS:
        for path in work_dir.glob(pattern):
            if path.exists():
                path.unlink()
                removed.append(path)
    return removed


def split_audio(pair: AlbumPair, work_dir: Path) -> list[Path]:
    """Split *pair* into one file per track inside *work_dir*.

    Args:
        pair: Audio image and its CUE sheet.
        work_dir: Empty scratch directory for the splitter output.

    Returns:
        Sorted list of split track files, pregap removed.

    Raises:
        UnsupportedFormatError: If no splitter handles the pair's format.
        MissingToolError: If the splitter is not installed.
        SplitError: If the splitter fails or produces no tracks.
    """
    cmd = build_split_command(pair, work_dir)
    check_tools_available(pair.audio_extension)

    logger.debug("split: %s", cmd)
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"{cmd[0]} exited with code {e.returncode}"
        raise SplitError(pair.audio_path, detail) from e

    for path in remove_pregap(work_dir):
        logger.debug("Removed pregap track %s", path.name)

    pattern = output_pattern(pair.audio_extension)
    output_files = sorted(work_dir.glob(pattern))
    if not output_files:
        raise SplitError(pair.audio_path, f"no {pattern} files produced")
    return output_files


def tag_tracks(cue_path: Path, files: list[Path]) -> bool:
    """Tag split tracks in place from the CUE sheet.

    Returns:
        True if tagging ran, False if cuetag is not installed or there
        is nothing to tag.

    Raises:
        TagError: If cuetag fails.
    """
    if not files:
        return False
    if shutil.which(TAGGER) is None:
        logger.info("%s not found, skipping tagging", TAGGER)
        return False

    cmd = [TAGGER, str(cue_path)] + [str(f) for f in files]
    logger.debug("tag: %s", cmd)
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"{TAGGER} exited with code {e.returncode}"
        raise TagError(cue_path, detail) from e
    return True
