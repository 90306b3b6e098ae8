"""Main CLI entry point for check-conan-info."""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import click

from check_conan_info import __version__
from check_conan_info.cli.list import run_list
from check_conan_info.cli.read import run_read
from check_conan_info.utils.logs import configure_logging
from check_conan_info.utils.state import DEFAULT_DIR

CLI_PRIMARY_COMMAND = "check-conan-info"


@dataclass(frozen=True)
class CommandSpec:
    """A subcommand: its handler and the parameters passed to it."""

    handler: Callable[..., None]
    params: list[click.Parameter] = field(default_factory=list)
    help: str = ""
    short_help: str | None = None


def _dir_option() -> click.Option:
    return click.Option(
        ["--dir", "directory"],
        default=str(DEFAULT_DIR),
        show_default=True,
        help="Directory containing package information",
    )


def _read(name: str, directory: str) -> None:
    run_read(name, directory)


def _list(
    positionals: tuple[str, ...],
    directory: str,
    all_packages: bool,
    count_github: bool,
) -> None:
    if len(positionals) > 2:
        raise click.UsageError(
            f"accepts at most 2 arg(s), received {len(positionals)}",
        )
    run_list(positionals, directory, all_packages, count_github)


def build_command_table() -> dict[str, CommandSpec]:
    """Describe every subcommand and its typed parameters."""
    return {
        "read": CommandSpec(
            handler=_read,
            params=[
                click.Argument(["name"]),
                _dir_option(),
            ],
            short_help="Read information of the specified package",
            help="Read version and source URLs of the package NAME.",
        ),
        "list": CommandSpec(
            handler=_list,
            params=[
                click.Argument(["positionals"], nargs=-1, metavar="[START] [COUNT]"),
                _dir_option(),
                click.Option(
                    ["--all", "all_packages"],
                    is_flag=True,
                    help="Process all packages in the directory",
                ),
                click.Option(
                    ["--count-github"],
                    is_flag=True,
                    help="Count how many packages have their first URL starting with https://github.com/",
                ),
            ],
            short_help="List information for multiple packages",
            help=(
                "List information for multiple packages, starting from the "
                "specified position and showing the specified number of packages.\n\n"
                "START is zero-based. A negative COUNT (after '--') means no limit."
            ),
        ),
    }


def build_cli(table: Mapping[str, CommandSpec]) -> click.Group:
    """Build the root command group from a command table."""

    def root(verbose: bool) -> None:
        configure_logging(verbose)

    group = click.Group(
        name=CLI_PRIMARY_COMMAND,
        callback=root,
        params=[
            click.Option(["-v", "--verbose"], is_flag=True, help="Enable verbose output"),
        ],
        help=(
            "Read package data information.\n\n"
            "This tool is used to read version information and parse sources "
            "data from conandata.yml files."
        ),
    )
    click.version_option(version=__version__, prog_name=CLI_PRIMARY_COMMAND)(group)

    for name, spec in table.items():
        group.add_command(
            click.Command(
                name=name,
                callback=spec.handler,
                params=list(spec.params),
                help=spec.help,
                short_help=spec.short_help,
            )
        )
    return group


COMMANDS = build_command_table()
cli = build_cli(COMMANDS)


def main(argv: list[str] | None = None) -> int:
    """Console entry point.

    Data errors are reported as text with exit status 0; only argument
    errors from the CLI framework exit 1.
    """
    try:
        cli.main(args=argv, prog_name=CLI_PRIMARY_COMMAND, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
