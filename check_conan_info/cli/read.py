"""Read command implementation."""

from __future__ import annotations

import click

from check_conan_info.core.extract import read_package_info
from check_conan_info.errors import ConanInfoError
from check_conan_info.utils.state import resolve_base_dir


def run_read(name: str, directory: str | None) -> None:
    """Print the record for one package.

    Failures are reported on stdout and the command still exits 0.
    """
    try:
        info = read_package_info(name, resolve_base_dir(directory))
    except ConanInfoError as exc:
        click.echo(f"Error: {exc}")
        return
    click.echo(info.render())
