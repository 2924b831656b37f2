"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from cuesplit.utils import output

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[paths]
output_root = "/tmp/cuesplit-out"
temp_root = "/tmp"

[behaviour]
delete_source = true

[display]
colored_output = false
""")
    return config_path


@pytest.fixture(autouse=True)
def reset_output_state() -> Generator[None, None, None]:
    """Keep verbosity and color settings from leaking between tests."""
    yield
    output.set_verbosity(verbose=False)
    output.set_color(True)
