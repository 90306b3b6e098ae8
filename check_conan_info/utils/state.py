"""Default locations for package trees."""

from __future__ import annotations

from pathlib import Path

DEFAULT_DIR = Path("temp-ver")


def resolve_base_dir(directory: str | Path | None = None) -> Path:
    """Resolve the package tree directory, falling back to ``temp-ver``."""
    if directory is None or str(directory) == "":
        return DEFAULT_DIR
    return Path(directory)
