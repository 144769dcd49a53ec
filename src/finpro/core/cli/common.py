"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click
from loguru import logger

from finpro.core.config import Config
from finpro.core.exceptions import ConfigurationError, FinproError
from finpro.core.utils.logging import setup_logging
from finpro.financial.models import PortfolioSnapshot


def load_config(config_file: str | None = None) -> Config:
    """Load config from an optional file plus FINPRO_* environment variables."""
    try:
        return Config(config_file=config_file)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def init_logging(config: Config, level: str | None = None) -> None:
    setup_logging(
        level=level or config.get("logging.level", "WARNING"),
        log_file=config.get("logging.file") or None,
        log_dir=config.get("paths.log_dir") or None,
    )


def load_snapshot_or_demo(path: str | None, config: Config) -> tuple[PortfolioSnapshot, bool]:
    """Load the snapshot at ``path`` (or ``paths.snapshot``), falling back to demo data.

    Returns:
        (snapshot, is_demo)
    """
    from finpro.financial.snapshot import DEMO_SNAPSHOT, load_snapshot

    path = path or config.get("paths.snapshot") or None
    if not path:
        logger.warning("No snapshot configured, using demonstration data")
        return DEMO_SNAPSHOT, True
    try:
        return load_snapshot(path), False
    except FinproError as e:
        logger.warning(f"Could not load snapshot ({e}), using demonstration data")
        return DEMO_SNAPSHOT, True


def build_dashboard(config: Config):
    from finpro.financial.dashboard import PortfolioDashboard

    try:
        return PortfolioDashboard(config.analytics())
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
