"""Shared setup logic for CLI commands."""

from __future__ import annotations

import os
from pathlib import Path

import click
from loguru import logger

from lookback.core.config import Config
from lookback.core.exceptions import ConfigurationError
from lookback.core.utils.logging import add_file_sink

LOOKBACK_DIR = Path.home() / ".lookback"
CONFIG_PATH = LOOKBACK_DIR / "config.yaml"

vault_option = click.option(
    "--vault",
    "vault_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Vault directory. Overrides vault.path from the config file.",
)
config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Config file (YAML or JSON). Defaults to {CONFIG_PATH}.",
)


def load_config(config_file: str | None = None) -> Config:
    """Load config from *config_file*, or ~/.lookback/config.yaml when present.

    When ``logging.file`` is set, a log file is added under ``paths.log_dir``
    (absolute paths are used as given).
    """
    config = Config(config_file=config_file or str(CONFIG_PATH), data_dir=str(LOOKBACK_DIR))
    log_name = config.get("logging.file")
    if log_name:
        log_dir = os.path.expanduser(config.get("paths.log_dir"))
        log_file = os.path.join(log_dir, os.path.expanduser(log_name))
        level = str(config.get("logging.level") or "INFO")
        try:
            add_file_sink(log_file, level=level)
        except ValueError as e:
            raise ConfigurationError(f"Invalid logging.level {level!r}: {e}") from e
        logger.debug(f"Logging to {log_file}")
    return config


def open_vault(config: Config, vault_path: str | None = None):
    """Build the MarkdownVault named on the command line or in the config."""
    from lookback.vault import MarkdownVault

    path = vault_path or config.get("vault.path", "")
    if not path:
        raise ConfigurationError("No vault configured. Pass --vault or set vault.path in the config file.")
    return MarkdownVault(path)


def create_service(config: Config, vault):
    """Create a JournalQueryService using the config's ``journal`` section."""
    from lookback.journal.service import JournalQueryService

    return JournalQueryService(vault, config.get("journal", {}))
