"""File operations: writable directories, temp dir tracking, placing output."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from types import TracebackType

from cuesplit.exceptions import OutputDirectoryError, TempDirError
from cuesplit.utils.sanitize import sanitize_filename

logger = logging.getLogger(__name__)

TEMP_PREFIX = "cuesplit."


def is_writable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.W_OK | os.X_OK)


def _nearest_existing(path: Path) -> Path:
    for candidate in (path, *path.parents):
        if candidate.exists():
            return candidate
    return path


def ensure_writable_dir(path: Path, *, create: bool = True) -> Path:
    """Make sure *path* is a writable directory.

    Missing directories are created with parents. With ``create=False``
    nothing is created; a missing directory is accepted if its nearest
    existing ancestor is writable (so it could be created later).

    Raises:
        OutputDirectoryError: If the directory cannot be created or written.
    """
    if not path.exists():
        if not create:
            if not is_writable_dir(_nearest_existing(path)):
                raise OutputDirectoryError(path, "cannot be created")
            return path
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(path, "cannot be created") from e

    if not path.is_dir():
        raise OutputDirectoryError(path, "is not a directory")
    if not is_writable_dir(path):
        raise OutputDirectoryError(path, "is not writable")
    return path


def select_temp_root(configured: Path | None = None) -> Path:
    """Pick the directory under which per-pair work dirs are created.

    Uses *configured* if given, else ``$TMPDIR``, else the platform
    default (usually ``/tmp``).

    Raises:
        TempDirError: If the directory is missing or not writable.
    """
    root = configured if configured is not None else Path(tempfile.gettempdir())
    root = root.expanduser()
    if not root.is_dir():
        raise TempDirError(root, "does not exist")
    if not is_writable_dir(root):
        raise TempDirError(root, "not writable")
    return root


class TempDirRegistry:
    """Tracks temporary work directories and removes them on exit.

    Every directory handed out by :meth:`create` stays registered until
    :meth:`release` removes it. Leaving the ``with`` block removes all
    directories still registered, whether the block ended normally or
    through an exception, ``KeyboardInterrupt`` or ``SystemExit``.

    Example::

        with TempDirRegistry() as temp_dirs:
            work = temp_dirs.create(Path("/tmp"))
            ...
            temp_dirs.release(work)
    """

    def __init__(self) -> None:
        self._paths: list[Path] = []

    def __enter__(self) -> TempDirRegistry:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def create(self, root: Path) -> Path:
        """Create a fresh ``cuesplit.XXXXXX`` directory under *root* and track it."""
        path = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX, dir=root))
        self._paths.append(path)
        logger.debug("Created temp dir %s", path)
        return path

    def release(self, path: Path) -> None:
        """Remove *path* and stop tracking it."""
        shutil.rmtree(path, ignore_errors=True)
        if path in self._paths:
            self._paths.remove(path)

    def cleanup(self) -> None:
        """Remove every tracked directory."""
        while self._paths:
            path = self._paths.pop()
            if path.is_dir():
                logger.debug("Removing temp dir %s", path)
                shutil.rmtree(path, ignore_errors=True)


def move_sanitized(source_dir: Path, target_dir: Path, pattern: str) -> list[Path]:
    """Move files matching *pattern* into *target_dir* under sanitized names.

    Existing files at the destination are overwritten.

    Returns:
        Destination paths, in source name order.
    """
    ensure_writable_dir(target_dir)

    destinations: list[Path] = []
    for source in sorted(source_dir.glob(pattern)):
        dest = target_dir / sanitize_filename(source.name)
        logger.debug("Moving '%s' -> '%s'", source, dest)
        if dest.exists():
            dest.unlink()
        shutil.move(str(source), dest)
        destinations.append(dest)
    return destinations
