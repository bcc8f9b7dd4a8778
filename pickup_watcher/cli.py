"""Command-line interface for the pickup watcher."""

from __future__ import annotations

import logging
from typing import Optional

import click

from .checker import AvailabilityChecker
from .config import Config, load_watch_config
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the JSON watch file (defaults to WATCH_CONFIG_PATH or config.json).",
)
@click.option(
    "--once",
    is_flag=True,
    help="Run a single check cycle and exit.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print notification to terminal instead of sending to LINE.",
)
def main(config_path: Optional[str], once: bool, dry_run: bool) -> None:
    try:
        Config.validate()
        watch_config = load_watch_config(config_path)
    except ConfigError as exc:
        logger.error("%s", exc)
        raise click.ClickException(str(exc)) from exc
    if dry_run:
        logger.info("DRY RUN mode enabled - notifications will be printed to terminal")
    checker = AvailabilityChecker.from_watch_config(watch_config, dry_run=dry_run)
    checker.run(once=once)
