"""Lookback CLI — entry point for show, week and properties commands."""

import click

from lookback import __version__
from lookback.core.utils.logging import level_for_verbosity, setup_logging


def _echo_sink(message) -> None:
    click.echo(message, err=True, nl=False)


@click.group()
@click.version_option(version=__version__, package_name="lookback")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
def main(verbose: int) -> None:
    """Lookback — see what you wrote in this same week in earlier years."""
    setup_logging(level=level_for_verbosity(verbose), sink=_echo_sink)


# Register subcommands
from .properties_cmd import properties  # noqa: E402
from .show_cmd import show  # noqa: E402
from .week_cmd import week  # noqa: E402

main.add_command(show)
main.add_command(week)
main.add_command(properties)
