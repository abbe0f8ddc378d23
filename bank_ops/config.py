"""Configuration management for bank-ops."""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from bank_ops.exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class SampleDataConfig:
    """Configuration for sample bank generation."""

    num_clients: int = 3
    seed: int | None = None
    locale: str = "pt_BR"
    default_overdraft: Decimal = Decimal("500")
    default_yield_rate: Decimal = Decimal("0.006")


@dataclass
class BankConfig:
    """Main configuration for bank-ops."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sample_data: SampleDataConfig = field(default_factory=SampleDataConfig)

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=log_format,
        )

        sample_data = SampleDataConfig(
            num_clients=_env_int("SAMPLE_CLIENTS", "3"),
            seed=_env_int("SEED", "0") if os.getenv("SEED") else None,
            locale=os.getenv("FAKER_LOCALE", "pt_BR"),
            default_overdraft=_env_decimal("DEFAULT_OVERDRAFT", "500"),
            default_yield_rate=_env_decimal("DEFAULT_YIELD_RATE", "0.006"),
        )

        return cls(logging=logging_config, sample_data=sample_data)


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a decimal number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {raw!r}")
    return value
