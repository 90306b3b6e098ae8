"""Test helpers for building package trees."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def write_conandata(path: Path, data: dict[str, Any] | str) -> Path:
    """Write a conandata.yml file from a dict or raw YAML text."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = data if isinstance(data, str) else yaml.safe_dump(data, sort_keys=False)
    path.write_text(text, encoding="utf-8")
    return path


def write_package(
    base: Path,
    name: str,
    data: dict[str, Any] | str,
    *,
    version: str = "all",
    recipes: Path | None = None,
) -> Path:
    """Create ``<base>/<name>/<version>/data.path`` pointing at a conandata file.

    The YAML file lives outside the package tree, under *recipes*
    (default: ``<base>/../recipes``). Returns the conandata path.
    """
    recipes = recipes or base.parent / "recipes"
    conandata = write_conandata(recipes / name / version / "conandata.yml", data)
    version_dir = base / name / version
    version_dir.mkdir(parents=True, exist_ok=True)
    (version_dir / "data.path").write_text(f"{conandata}\n", encoding="utf-8")
    return conandata


def sources(version: str, url: str | list[str], **extra: Any) -> dict[str, Any]:
    """Build a conandata payload with a single sources entry."""
    entry: dict[str, Any] = {"url": url}
    entry.update(extra)
    return {"sources": {version: entry}}
