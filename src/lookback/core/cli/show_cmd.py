"""lookback show — list notes from the same week in earlier years."""

from __future__ import annotations

import click

from lookback.core.exceptions import LookbackError

from .common import config_option, create_service, load_config, open_vault, vault_option


@click.command()
@click.argument("note")
@vault_option
@config_option
@click.option("--year", type=int, default=None, help="Treat this as the current year.")
def show(note: str, vault_path: str | None, config_file: str | None, year: int | None) -> None:
    """Show entries written in the same ISO week as NOTE in earlier years.

    NOTE is a vault-relative path, a filesystem path, or a unique note name.
    """
    from lookback.core.utils.async_helpers import run_async_safely
    from lookback.journal.dates import format_iso_week

    try:
        config = load_config(config_file)
        vault = open_vault(config, vault_path)
        active = vault.resolve(note)
        if active is None:
            raise click.ClickException(f"Note not found in vault: {note}")

        service = create_service(config, vault)
        view = run_async_safely(service.render(active, current_year=year))
    except LookbackError as e:
        raise click.ClickException(str(e)) from e

    if view is None:
        click.echo(f"{active.path} is not a journal note.")
        return
    if view.message:
        click.echo(view.message)
        return

    click.echo(f"{active.path} · {view.active_date} · {format_iso_week(view.active_date)}")
    for section_view in view.sections:
        click.echo("")
        click.echo(f"## {section_view.section.title} ({section_view.section.target_year})")
        if section_view.is_empty:
            click.echo("  No entries")
            continue
        for item in section_view.entries:
            click.echo(f"- {item.entry.date_parts}  {item.entry.file.basename}")
            if item.preview:
                for line in item.preview.split("\n"):
                    click.echo(f"    {line}")
