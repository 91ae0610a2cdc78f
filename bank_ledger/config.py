"""Configuration management for bank-ledger."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import LOG_FORMATS


@dataclass
class OutputConfig:
    """Export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    output: OutputConfig = field(default_factory=OutputConfig)
    load_sample_data: bool = True
    random_accounts: int = 0
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    locale: str = "en_US"

    def validate(self) -> "LedgerConfig":
        """Check values and return self.

        Raises
        ------
        ConfigurationError
            If the log level or format is unknown, or the random
            account count is negative.
        """
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format: {self.log_format} (expected one of {', '.join(LOG_FORMATS)})"
            )
        if self.random_accounts < 0:
            raise ConfigurationError(f"random_accounts cannot be negative: {self.random_accounts}")
        return self

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_bool("PRETTY_JSON", False),
        )

        try:
            random_accounts = int(os.getenv("RANDOM_ACCOUNTS", "0"))
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid integer in environment: {exc}") from exc

        return cls(
            output=output,
            load_sample_data=_env_bool("LOAD_SAMPLE_DATA", True),
            random_accounts=random_accounts,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        ).validate()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
