"""Unit tests for audio/cue pair resolution and discovery."""

from __future__ import annotations

from pathlib import Path

import pytest
from cuesplit.cue.pairing import (
    AUDIO_EXTENSIONS,
    AlbumPair,
    cue_candidates,
    find_audio_files,
    resolve_pair,
)


def _snapshot(root: Path) -> set[Path]:
    return set(root.rglob("*"))


# --- cue_candidates ---


def test_candidates_order(tmp_path: Path) -> None:
    audio = tmp_path / "Album.flac"
    assert cue_candidates(audio) == [tmp_path / "Album.flac.cue", tmp_path / "Album.cue"]


def test_candidates_stem_ending_in_cue(tmp_path: Path) -> None:
    audio = tmp_path / "Album.cue.flac"
    assert cue_candidates(audio) == [
        tmp_path / "Album.cue.flac.cue",
        tmp_path / "Album.cue.cue",
        tmp_path / "Album.cue",
    ]


# --- resolve_pair ---


@pytest.mark.parametrize("ext", sorted(AUDIO_EXTENSIONS))
def test_ext_cue_beats_plain_cue(tmp_path: Path, ext: str) -> None:
    audio = tmp_path / f"name.{ext}"
    audio.touch()
    (tmp_path / f"name.{ext}.cue").touch()
    (tmp_path / "name.cue").touch()

    pair = resolve_pair(audio)

    assert pair == AlbumPair(audio, tmp_path / f"name.{ext}.cue", ext)


def test_plain_cue_fallback(tmp_path: Path) -> None:
    audio = tmp_path / "Kapital.flac"
    audio.touch()
    (tmp_path / "Kapital.cue").touch()

    pair = resolve_pair(audio)

    assert pair is not None
    assert pair.cue_path == tmp_path / "Kapital.cue"
    assert pair.audio_extension == "flac"
    assert pair.audio_dir == tmp_path


def test_stem_cue_suffix_stripped(tmp_path: Path) -> None:
    audio = tmp_path / "Album.cue.flac"
    audio.touch()
    (tmp_path / "Album.cue").touch()

    pair = resolve_pair(audio)

    assert pair is not None
    assert pair.cue_path == tmp_path / "Album.cue"


def test_stem_cue_prefers_unstripped(tmp_path: Path) -> None:
    audio = tmp_path / "Album.cue.flac"
    audio.touch()
    (tmp_path / "Album.cue.cue").touch()
    (tmp_path / "Album.cue").touch()

    pair = resolve_pair(audio)

    assert pair is not None
    assert pair.cue_path == tmp_path / "Album.cue.cue"


def test_extension_lowercased(tmp_path: Path) -> None:
    audio = tmp_path / "Loud.FLAC"
    audio.touch()
    (tmp_path / "Loud.cue").touch()

    pair = resolve_pair(audio)

    assert pair is not None
    assert pair.audio_extension == "flac"


def test_no_cue_skips_without_mutation(tmp_path: Path) -> None:
    audio = tmp_path / "Lonely.flac"
    audio.touch()
    (tmp_path / "Other.cue").touch()
    before = _snapshot(tmp_path)

    assert resolve_pair(audio) is None
    assert _snapshot(tmp_path) == before


def test_cue_directory_is_not_a_match(tmp_path: Path) -> None:
    audio = tmp_path / "Album.flac"
    audio.touch()
    (tmp_path / "Album.cue").mkdir()

    assert resolve_pair(audio) is None


def test_pair_is_immutable(tmp_path: Path) -> None:
    pair = AlbumPair(tmp_path / "a.flac", tmp_path / "a.cue", "flac")
    with pytest.raises(AttributeError):
        pair.cue_path = tmp_path / "b.cue"  # type: ignore[misc]


# --- find_audio_files ---


def test_find_audio_files_recursive_and_filtered(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "deep").mkdir(parents=True)
    (tmp_path / "b" / "Album.FLAC").touch()
    (tmp_path / "a" / "deep" / "Live.ape").touch()
    (tmp_path / "a" / "cover.jpg").touch()
    (tmp_path / "a" / "Album.cue").touch()
    (tmp_path / "top.mp3").touch()
    (tmp_path / "notes.txt").touch()

    found = list(find_audio_files(tmp_path))

    assert found == [
        tmp_path / "top.mp3",
        tmp_path / "a" / "deep" / "Live.ape",
        tmp_path / "b" / "Album.FLAC",
    ]


def test_find_audio_files_skips_directories_named_like_audio(tmp_path: Path) -> None:
    (tmp_path / "weird.flac").mkdir()
    assert list(find_audio_files(tmp_path)) == []


def test_find_audio_files_all_extensions(tmp_path: Path) -> None:
    for ext in AUDIO_EXTENSIONS:
        (tmp_path / f"file.{ext}").touch()
    found = {p.suffix[1:] for p in find_audio_files(tmp_path)}
    assert found == set(AUDIO_EXTENSIONS)
