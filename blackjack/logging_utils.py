"""Logging setup shared by the console driver and tests."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (blackjack/cli.py)."""
    level = (level or config.logging.level).upper()
    if config.debug:
        level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=config.logging.format,
        datefmt=config.logging.datefmt,
        force=True,
    )
