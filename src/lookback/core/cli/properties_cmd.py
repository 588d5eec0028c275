"""lookback properties — list frontmatter properties and example values."""

from __future__ import annotations

import click

from lookback.core.exceptions import LookbackError

from .common import config_option, load_config, open_vault, vault_option


@click.command()
@vault_option
@config_option
@click.option("--limit", type=int, default=10, show_default=True, help="Values shown per property.")
def properties(vault_path: str | None, config_file: str | None, limit: int) -> None:
    """List properties found in the vault, for choosing filter and date fields."""
    from lookback.vault import build_property_catalog

    try:
        vault = open_vault(load_config(config_file), vault_path)
        catalog = build_property_catalog(vault.notes())
    except LookbackError as e:
        raise click.ClickException(str(e)) from e

    for name in catalog.properties:
        values = catalog.suggestions(name)
        shown = ", ".join(values[:limit])
        more = f" (+{len(values) - limit} more)" if len(values) > limit else ""
        click.echo(f"{name}: {shown}{more}" if values else name)
