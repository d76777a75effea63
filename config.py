"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Read an integer environment variable, treating unset or blank as None."""
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def _parse_prompt_attempts() -> int | None:
    """Parse BLACKJACK_MAX_PROMPT_ATTEMPTS; 0 or unset means unbounded."""
    attempts = _parse_optional_int("BLACKJACK_MAX_PROMPT_ATTEMPTS")
    if attempts is None or attempts <= 0:
        return None
    return attempts


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class TableConfig:
    """Console table configuration."""

    betting_enabled: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_BETTING", "true").lower() == "true"
    )
    seed: int | None = field(default_factory=lambda: _parse_optional_int("BLACKJACK_SEED"))
    max_prompt_attempts: int | None = field(default_factory=_parse_prompt_attempts)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    table: TableConfig = field(default_factory=TableConfig)


# Global configuration instance
config = AppConfig()
