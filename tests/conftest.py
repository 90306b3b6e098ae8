"""Shared test fixtures for the check-conan-info test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import sources, write_package


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Return an empty package tree directory."""
    base = tmp_path / "temp-ver"
    base.mkdir()
    return base


@pytest.fixture
def zlib_tree(base_dir: Path) -> Path:
    """A tree holding a single well-formed package."""
    write_package(
        base_dir,
        "zlib",
        sources("1.3.1", "https://github.com/madler/zlib/releases/download/v1.3.1/zlib-1.3.1.tar.gz"),
    )
    return base_dir
