#!/usr/bin/env python3
"""
Configuration Management for Finance Reports

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

REPORT_FORMATS = ("json", "csv")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ReportConfig:
    """Report generation defaults."""

    # Window used when the caller gives no --start
    default_range_days: int = 30
    output_format: str = "json"


@dataclass
class Config:
    """
    Main configuration class for the finance reports application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    ledger_dir: Path
    output_dir: Path

    report: ReportConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    # Settings that could not be parsed, reported by validate()
    load_errors: list[str] = field(default_factory=list)

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FINANCE_REPORTS_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_finance_reports"
            base_dir = Path(os.getenv("FINANCE_REPORTS_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("FINANCE_REPORTS_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        ledger_dir = Path(os.getenv("FINANCE_REPORTS_LEDGER_DIR", str(data_dir / "ledger")))
        output_dir = data_dir / "reports"

        load_errors: list[str] = []
        range_days_setting = os.getenv("REPORT_RANGE_DAYS", "30")
        try:
            default_range_days = int(range_days_setting)
        except ValueError:
            load_errors.append(f"REPORT_RANGE_DAYS must be a whole number of days, got {range_days_setting!r}")
            default_range_days = ReportConfig.default_range_days

        report = ReportConfig(
            default_range_days=default_range_days,
            output_format=os.getenv("REPORT_FORMAT", "json").lower(),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            ledger_dir=ledger_dir,
            output_dir=output_dir,
            report=report,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            load_errors=load_errors,
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = list(self.load_errors)

        if self.report.default_range_days < 0:
            errors.append("REPORT_RANGE_DAYS must be non-negative")

        if self.report.output_format not in REPORT_FORMATS:
            errors.append(f"REPORT_FORMAT must be one of: {', '.join(REPORT_FORMATS)}")

        if not isinstance(getattr(logging, self.log_level, None), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        if self.debug:
            logging.getLogger("finance_reports").setLevel(logging.DEBUG)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, ReportConfig):
                result[field_name] = dict(field_value.__dict__)
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_ledger_dir() -> Path:
    """Get the ledger directory path."""
    return get_config().ledger_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
