"""Package directory layout: version selection and pointer files.

A package tree looks like ``<base>/<package>/<version>/data.path`` where
``data.path`` holds a single line naming the package's YAML metadata file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from check_conan_info.errors import (
    DataReadError,
    EmptyFileError,
    EmptyResultError,
    NoVersionFoundError,
    PackageNotFoundError,
)

logger = logging.getLogger(__name__)

POINTER_FILENAME = "data.path"


def package_dir(base: str | Path, name: str) -> Path:
    """Return the directory holding a package's versions."""
    return Path(base) / name


def list_entries(path: str | Path) -> list[tuple[str, bool]]:
    """Return ``(name, is_dir)`` for each entry of *path*, sorted by name.

    Names are compared as plain strings, so ``1.10`` sorts before ``1.9``.
    Symlinks report their own type and are never directories.
    """
    with os.scandir(path) as it:
        entries = [(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]
    return sorted(entries, key=lambda entry: entry[0])


def first_version_dir(base: str | Path, name: str) -> Path:
    """Return the first version subdirectory of a package.

    Raises:
        PackageNotFoundError: If the package directory is missing
        DataReadError: If the package directory cannot be listed
        EmptyResultError: If the package directory has no entries
        NoVersionFoundError: If no entry is a directory
    """
    pkg_dir = package_dir(base, name)
    if not pkg_dir.exists():
        raise PackageNotFoundError(f"package {name} does not exist")

    try:
        entries = list_entries(pkg_dir)
    except OSError as exc:
        raise DataReadError(f"failed to read version directories: {exc}") from exc

    if not entries:
        raise EmptyResultError(f"no versions found for package {name}")

    for entry_name, is_dir in entries:
        if is_dir:
            logger.debug("Package %s: using version directory %s", name, entry_name)
            return pkg_dir / entry_name

    raise NoVersionFoundError(f"no version directories found for package {name}")


def read_pointer(path: str | Path) -> str:
    """Read the first line of a pointer file, without its line terminator."""
    try:
        with open(path, encoding="utf-8") as handle:
            line = handle.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise DataReadError(str(exc)) from exc

    if not line:
        raise EmptyFileError(f"{POINTER_FILENAME} is empty")
    return line.rstrip("\r\n")


def read_text(path: str | Path) -> str:
    """Read a whole text file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataReadError(str(exc)) from exc
