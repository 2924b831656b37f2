"""Command-line interface for cuesplit."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
from rich.markup import escape

from cuesplit import __version__
from cuesplit.config import load_config
from cuesplit.exceptions import ConfigError, FatalError, RootDirectoryError
from cuesplit.pipeline import RunContext, RunSummary, process_tree
from cuesplit.utils.fileops import TempDirRegistry, ensure_writable_dir, select_temp_root
from cuesplit.utils.output import (
    error,
    info,
    set_color,
    set_verbosity,
    setup_logging,
    success,
)

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Signals that abort the run; temp dirs are removed on the way out
_TERMINATING_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)
)


def _raise_system_exit(signum: int, frame: object) -> None:
    raise SystemExit(128 + signum)


@contextmanager
def _exit_on_signals() -> Iterator[None]:
    """Turn SIGTERM/SIGHUP into SystemExit so cleanup handlers run."""
    previous = {sig: signal.signal(sig, _raise_system_exit) for sig in _TERMINATING_SIGNALS}
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def _print_summary(summary: RunSummary, dry_run: bool) -> None:
    if summary.found == 0:
        info("No audio/cue pairs found.")
        return

    if dry_run:
        info(f"\nDry run: {summary.planned} pair(s) would be split")
        return

    skipped = f", {summary.skipped} skipped" if summary.skipped else ""
    if summary.failed:
        info(f"\nDone: {summary.split} split{skipped}, {summary.failed} errors")
    else:
        success(f"\nDone: {summary.split} split{skipped}")


@click.command("cuesplit", context_settings=CONTEXT_SETTINGS)
@click.argument(
    "root_dir",
    required=False,
    default=".",
    type=click.Path(path_type=Path),
)
@click.option(
    "--output",
    "-o",
    "output_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output root directory.",
)
@click.option(
    "--temp-dir",
    "temp_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Use DIR for temporary split dirs.",
)
@click.option(
    "--delete-source",
    is_flag=True,
    default=False,
    help="Delete source audio files after splitting.",
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    default=False,
    help="Do not modify anything; show operations.",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Character encoding for cue files (e.g., cp1252, shift-jis).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/cuesplit/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose", "-v", "verbose_flag", is_flag=True, default=False, help="Verbose logging."
)
@click.version_option(version=__version__, prog_name="cuesplit")
def cli(
    root_dir: Path,
    output_root: Path | None,
    temp_root: Path | None,
    delete_source: bool,
    dry_run: bool,
    encoding: str | None,
    config_path: Path | None,
    no_color: bool,
    verbose_flag: bool,
) -> None:
    """Split single-file albums using CUE sheets.

    Walks ROOT_DIR (default: current directory) for FLAC, APE, WAV,
    WavPack, TTA, MP3 and Ogg images that have a matching cue sheet and
    splits each into an "Artist - Year - Album" folder.

    If no output directory is specified, tracks are placed next to the
    audio files, but only if that directory is writable.

    \b
    Cue selection priorities for File.ext:
       1. File.ext.cue
       2. File.cue
    """
    set_verbosity(verbose=verbose_flag)
    setup_logging(verbose=verbose_flag)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None
    if disable_color:
        set_color(False)

    try:
        config = load_config(config_path)
        if not disable_color and not config.colored_output:
            set_color(False)

        if not root_dir.is_dir():
            raise RootDirectoryError(root_dir)

        if output_root is None:
            output_root = config.output_root
        if output_root is not None:
            output_root = ensure_writable_dir(output_root.expanduser(), create=not dry_run)

        work_root = select_temp_root(temp_root or config.temp_root)

        with TempDirRegistry() as temp_dirs, _exit_on_signals():
            ctx = RunContext(
                root_dir=root_dir,
                output_root=output_root,
                temp_root=work_root,
                temp_dirs=temp_dirs,
                delete_source=delete_source or config.delete_source,
                dry_run=dry_run,
                encoding=encoding,
            )
            summary = process_tree(ctx)
    except (FatalError, ConfigError) as e:
        error(escape(str(e)), hint=e.hint)
        sys.exit(EXIT_FAILURE)

    _print_summary(summary, dry_run)

    if summary.failed:
        sys.exit(EXIT_FAILURE)
    sys.exit(EXIT_SUCCESS)