"""Exception hierarchy for cuesplit."""

from pathlib import Path


class CueSplitError(Exception):
    """Base exception for all cuesplit errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all cuesplit errors with
    a single except clause.
    """

    hint: str | None = None


# Fatal Errors
class FatalError(CueSplitError):
    """Misconfiguration that aborts the whole run."""

    pass


class MissingToolError(FatalError):
    """A required external command is not on PATH."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        self.hint = "Install it via your package manager and make sure it is on PATH."
        super().__init__(f"Required command not found: {tool}")


class RootDirectoryError(FatalError):
    """The directory to scan does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Not a directory: {path}")


class OutputDirectoryError(FatalError):
    """Output directory cannot be created or written to."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        self.hint = "Check permissions or choose another directory with -o DIR."
        super().__init__(f"Output directory {reason}: {path}")


class ReadOnlySourceError(FatalError):
    """Source album directory is read-only and no output root was given."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.hint = "Use -o DIR to write split tracks somewhere else."
        super().__init__(f"Source directory '{path}' is read-only")


class TempDirError(FatalError):
    """Temporary root directory is missing or not writable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        self.hint = "Pass --temp-dir DIR or set TMPDIR to a writable directory."
        super().__init__(f"Temp dir '{path}' {reason}")


# Configuration Errors
class ConfigError(CueSplitError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Per-pair Errors
class PairError(CueSplitError):
    """Failure confined to one audio/cue pair; the run continues."""

    pass


class CueReadError(PairError):
    """CUE sheet cannot be opened or decoded."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot read {path}: {detail}")


class UnsupportedFormatError(PairError):
    """Audio extension has no splitter."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported format '{extension}'")


class SplitError(PairError):
    """External splitter failed or produced no tracks."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Split failed for {path.name}: {reason}")


class TagError(PairError):
    """External tagger failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Tagging failed for {path.name}: {reason}")
