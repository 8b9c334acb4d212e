"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output directory for generated pages. Not created up front."""
    return tmp_path / "BookHTML"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes docredirect.toml into tmp_path."""

    def _write(content: str) -> Path:
        config_file = tmp_path / "docredirect.toml"
        config_file.write_text(content)
        return config_file

    return _write
