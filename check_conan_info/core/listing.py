"""Aggregate package records across a range of a package directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from check_conan_info.core.extract import read_package_info
from check_conan_info.core.layout import list_entries
from check_conan_info.errors import ConanInfoError, DataReadError, InvalidRangeError
from check_conan_info.models.package import GITHUB_PREFIX, ListingReport

# Passed as count to process every entry from start onwards.
UNBOUNDED = -1


def resolve_range(start: int, count: int, total: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of *total* entries to process."""
    if start < 0 or start >= total:
        raise InvalidRangeError(f"Invalid start position: {start} (total packages: {total})")
    end = total
    if count >= 0 and start + count < end:
        end = start + count
    return start, end


def list_packages(
    start: int,
    count: int,
    base: str | Path,
    *,
    count_github: bool = False,
    echo: Callable[[str], None] = click.echo,
) -> ListingReport:
    """Print records for packages ``start`` through ``start + count``.

    A failing package is reported and counted, and the listing moves on.
    When *count_github* is set, a statistics block follows the records.

    Raises:
        DataReadError: If the base directory cannot be listed
        InvalidRangeError: If *start* is outside the directory
    """
    directory = str(base)
    try:
        packages = list_entries(base)
    except OSError as exc:
        raise DataReadError(f"Failed to read packages directory: {exc}") from exc

    report = ListingReport(directory=directory, total=len(packages))
    if not packages:
        echo("No packages found")
        return report

    start, end = resolve_range(start, count, len(packages))
    report.start, report.end = start, end

    echo(f"Listing packages {start + 1} to {end} (total: {len(packages)}) in directory: {directory}")
    echo("")

    for index in range(start, end):
        name, is_dir = packages[index]
        if not is_dir:
            continue
        echo(f"=== Package {index + 1}: {name} ===")
        try:
            info = read_package_info(name, base)
        except ConanInfoError as exc:
            echo(f"Error: {exc}")
            echo("")
            report.error_count += 1
            report.failures[name] = str(exc)
            continue

        echo(info.render())
        echo("")
        report.processed.append(name)
        if info.has_github_origin:
            report.github_count += 1

    if count_github:
        echo("")
        echo("=== Statistics ===")
        echo(
            f"Packages with first URL starting with {GITHUB_PREFIX}: "
            f"{report.github_count}/{report.span}"
        )
        echo(f"Packages with errors: {report.error_count}/{report.span}")

    return report
