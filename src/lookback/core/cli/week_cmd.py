"""lookback week — print the ISO week of a date."""

from __future__ import annotations

import click

from lookback.journal.dates import format_iso_week, parse_date


@click.command()
@click.argument("value")
def week(value: str) -> None:
    """Print the ISO week (YYYY-Www) of a YYYY-MM-DD date."""
    parts = parse_date(value)
    if parts is None:
        raise click.BadParameter(f"'{value}' is not a valid YYYY-MM-DD date", param_hint="VALUE")
    click.echo(format_iso_week(parts))
