"""List command implementation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import click

from check_conan_info.core.listing import UNBOUNDED, list_packages
from check_conan_info.errors import ConanInfoError, InvalidArgumentError
from check_conan_info.utils.state import resolve_base_dir

logger = logging.getLogger(__name__)


def parse_range_args(values: Sequence[str]) -> tuple[int, int]:
    """Parse the ``START COUNT`` positionals of the list command."""
    if len(values) != 2:
        raise InvalidArgumentError(
            "Error: requires start and count arguments when --all is not specified"
        )
    raw_start, raw_count = values

    try:
        start = int(raw_start)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid start position: {exc}") from exc

    try:
        count = int(raw_count)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid count: {exc}") from exc

    return start, count


def run_list(
    values: Sequence[str],
    directory: str | None,
    all_packages: bool,
    count_github: bool,
) -> None:
    """Print records for a range of packages, or for all with ``--all``."""
    if all_packages:
        start, count = 0, UNBOUNDED
    else:
        try:
            start, count = parse_range_args(values)
        except InvalidArgumentError as exc:
            click.echo(str(exc))
            return

    try:
        report = list_packages(
            start,
            count,
            resolve_base_dir(directory),
            count_github=count_github,
        )
    except ConanInfoError as exc:
        click.echo(str(exc))
        return

    logger.debug(
        "Listed %d of %d entries: %d records, %d errors",
        report.span,
        report.total,
        len(report.processed),
        report.error_count,
    )
    for name, message in report.failures.items():
        logger.debug("Failed package %s: %s", name, message)
