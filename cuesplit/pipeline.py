"""Sequential album splitting pipeline.

Each discovered audio file is paired, named, split, tagged and moved into
place before the next file is looked at. Per-pair failures are reported
and the walk continues; fatal errors propagate to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from cuesplit.cue.destination import compose_output_dir
from cuesplit.cue.metadata import read_cue_metadata
from cuesplit.cue.pairing import AlbumPair, find_audio_files, resolve_pair
from cuesplit.cue.splitter import output_pattern, split_audio, tag_tracks
from cuesplit.exceptions import PairError, UnsupportedFormatError
from cuesplit.utils.fileops import TempDirRegistry, move_sanitized
from cuesplit.utils.output import dry_run, error, info, success, verbose, warning


@dataclass
class RunContext:
    """Settings and scoped resources for one run.

    Attributes:
        root_dir: Directory tree to scan.
        output_root: Where album folders go (None = next to the source).
        temp_root: Parent directory for per-pair work directories.
        temp_dirs: Registry that removes work directories on any exit path.
        delete_source: Delete source audio after a successful split.
        dry_run: Report what would happen without touching anything.
        encoding: CUE sheet encoding (None = auto-detect).
    """

    root_dir: Path
    output_root: Path | None
    temp_root: Path
    temp_dirs: TempDirRegistry
    delete_source: bool = False
    dry_run: bool = False
    encoding: str | None = None


@dataclass
class PairResult:
    """Outcome of processing one audio/cue pair."""

    pair: AlbumPair
    output_dir: Path | None = None
    status: str = "ok"  # ok, dry-run, skipped, error
    files: list[Path] = field(default_factory=list)
    error: str | None = None


@dataclass
class RunSummary:
    """Counts for a whole run."""

    split: int = 0
    planned: int = 0
    skipped: int = 0
    failed: int = 0
    unpaired: int = 0
    results: list[PairResult] = field(default_factory=list)

    @property
    def found(self) -> int:
        return len(self.results)

    def add(self, result: PairResult) -> None:
        self.results.append(result)
        if result.status == "ok":
            self.split += 1
        elif result.status == "dry-run":
            self.planned += 1
        elif result.status == "skipped":
            self.skipped += 1
        else:
            self.failed += 1


def _fail(result: PairResult, exc: Exception) -> PairResult:
    result.status = "error"
    result.error = str(exc)
    error(f"Failed: {escape(result.pair.audio_path.name)}: {escape(str(exc))}")
    return result


def _skip(result: PairResult, exc: Exception) -> PairResult:
    result.status = "skipped"
    result.error = str(exc)
    warning(f"Skipping {escape(result.pair.audio_path.name)}: {escape(str(exc))}")
    return result


def process_pair(ctx: RunContext, pair: AlbumPair) -> PairResult:
    """Split one pair into its album folder.

    Returns:
        PairResult with status ``ok``, ``dry-run``, ``skipped`` or ``error``.

    Raises:
        FatalError: On misconfiguration that must stop the run.
    """
    result = PairResult(pair=pair)

    info("Processing:")
    info(f"  Audio:  {escape(str(pair.audio_path))}")
    info(f"  Cue:    {escape(str(pair.cue_path))}")
    info(f"  Type:   {pair.audio_extension}")

    try:
        metadata = read_cue_metadata(pair.cue_path, encoding=ctx.encoding)
        output_dir = compose_output_dir(
            pair.audio_dir,
            pair.cue_path,
            pair.audio_path,
            ctx.output_root,
            encoding=ctx.encoding,
            metadata=metadata,
            create=not ctx.dry_run,
        )
    except PairError as e:
        return _fail(result, e)

    result.output_dir = output_dir
    info(f"  Output: {escape(str(output_dir))}")
    if metadata.track_count:
        verbose(f"  Tracks: {metadata.track_count}")

    if ctx.dry_run:
        dry_run(f"would split '{escape(str(pair.audio_path))}'")
        if ctx.delete_source:
            dry_run(f"would delete '{escape(str(pair.audio_path))}'")
        result.status = "dry-run"
        return result

    work_dir = ctx.temp_dirs.create(ctx.temp_root)
    verbose(f"  Temp:   {escape(str(work_dir))}")
    try:
        files = split_audio(pair, work_dir)
        if metadata.track_count and len(files) != metadata.track_count:
            warning(
                f"Expected {metadata.track_count} tracks from "
                f"{escape(pair.cue_path.name)}, splitter produced {len(files)}"
            )
        if tag_tracks(pair.cue_path, files):
            verbose(f"  Tagged {len(files)} tracks")
        else:
            verbose("  Tagging skipped")
        result.files = move_sanitized(work_dir, output_dir, output_pattern(pair.audio_extension))
    except UnsupportedFormatError as e:
        return _skip(result, e)
    except (PairError, OSError) as e:
        return _fail(result, e)
    finally:
        ctx.temp_dirs.release(work_dir)

    if ctx.delete_source:
        try:
            pair.audio_path.unlink()
            verbose(f"  Deleted source {escape(pair.audio_path.name)}")
        except OSError as e:
            warning(f"Could not delete source {escape(pair.audio_path.name)}: {e}")

    success(f"Split {escape(pair.audio_path.name)} -> {len(result.files)} tracks")
    return result


def process_tree(ctx: RunContext) -> RunSummary:
    """Walk ``ctx.root_dir`` and process every paired audio file in order.

    Raises:
        FatalError: On misconfiguration that must stop the run.
    """
    summary = RunSummary()
    info(f"Scanning under: {escape(str(ctx.root_dir))}")

    for audio_path in find_audio_files(ctx.root_dir):
        pair = resolve_pair(audio_path)
        if pair is None:
            summary.unpaired += 1
            verbose(f"Skipping '{escape(str(audio_path))}': no matching cue")
            continue
        summary.add(process_pair(ctx, pair))

    return summary
