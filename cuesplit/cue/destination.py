"""Output directory naming and placement.

Composes ``"{artist} - {year} - {album}"`` (or ``"{artist} - {album}"``
without a year), adds ``" (Disc N)"`` for multi-disc releases that do not
already name their disc, and decides where the folder lives.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cuesplit.cue.disc import detect_disc_number, has_disc_tag
from cuesplit.cue.metadata import CueMetadata, read_cue_metadata
from cuesplit.exceptions import ReadOnlySourceError
from cuesplit.utils.fileops import ensure_writable_dir, is_writable_dir
from cuesplit.utils.sanitize import sanitize_dirname

logger = logging.getLogger(__name__)


def detect_pair_disc(audio_path: Path, cue_path: Path, audio_dir: Path) -> int | None:
    """Disc number from the audio name, else the cue name, else the directory name."""
    # "." and ".." carry no name; look at the directory they point to
    for text in (audio_path.name, cue_path.name, audio_dir.resolve().name):
        disc = detect_disc_number(text)
        if disc is not None:
            return disc
    return None


def compose_folder_name(metadata: CueMetadata, disc: int | None = None) -> str:
    """Build the sanitized album folder name.

    Examples:
        >>> compose_folder_name(CueMetadata("Laibach", "Kapital", "1992"))
        'Laibach - 1992 - Kapital'
        >>> compose_folder_name(CueMetadata("Laibach", "Kapital"), disc=2)
        'Laibach - Kapital (Disc 2)'
    """
    artist = metadata.artist_or_default
    album = metadata.album_or_default

    if metadata.year:
        folder = f"{artist} - {metadata.year} - {album}"
    else:
        folder = f"{artist} - {album}"

    if disc is not None and not has_disc_tag(folder):
        folder = f"{folder} (Disc {disc})"

    return sanitize_dirname(folder)


def compose_output_dir(
    audio_dir: Path,
    cue_path: Path,
    audio_path: Path,
    output_root: Path | None,
    *,
    encoding: str | None = None,
    metadata: CueMetadata | None = None,
    create: bool = True,
) -> Path:
    """Decide the destination directory for one audio/cue pair.

    Args:
        audio_dir: Directory holding the audio file.
        cue_path: CUE sheet of the pair.
        audio_path: Audio image of the pair.
        output_root: Explicit output root, or None to write next to the source.
        encoding: CUE sheet encoding, None for auto-detection.
        metadata: Already-read metadata of *cue_path*; read here if None.
        create: Create *output_root* if missing. Dry runs pass False.

    Returns:
        ``output_root/folder`` or ``audio_dir/folder``.

    Raises:
        CueReadError: If the CUE sheet cannot be read.
        ReadOnlySourceError: If no output root is given and *audio_dir*
            is not writable.
        OutputDirectoryError: If *output_root* cannot be created or written.
    """
    if metadata is None:
        metadata = read_cue_metadata(cue_path, encoding=encoding)
    disc = detect_pair_disc(audio_path, cue_path, audio_dir)
    folder = compose_folder_name(metadata, disc)
    logger.debug("Folder for %s: %r (disc=%s)", audio_path.name, folder, disc)

    if output_root is None:
        if not is_writable_dir(audio_dir):
            raise ReadOnlySourceError(audio_dir)
        return audio_dir / folder

    ensure_writable_dir(output_root, create=create)
    return output_root / folder
