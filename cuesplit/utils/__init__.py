"""Utility modules for cuesplit."""

from cuesplit.utils.output import (
    console,
    error,
    info,
    success,
    warning,
)
from cuesplit.utils.sanitize import sanitize_dirname, sanitize_filename

__all__ = [
    "console",
    "error",
    "info",
    "sanitize_dirname",
    "sanitize_filename",
    "success",
    "warning",
]
