"""
Secure Configuration Management

Provides centralized, validated configuration for the dashboard core.
Replaces scattered os.getenv() calls with strict validation and fail-fast behavior.

Usage:
    from devinsights.secure_config import get_config

    config = get_config()
    dashboard_config = config.get_dashboard_config()
    print(dashboard_config.default_interval)
    print(dashboard_config.chart_palette)

Raises:
    ConfigurationError: If configuration is invalid
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from devinsights.domain.constants import chart_constants
from devinsights.domain.metrics import VALID_INTERVALS

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class DashboardConfig:
    """
    Validated dashboard configuration.

    Attributes:
        default_interval: Bucket size requested for new views (daily, weekly, monthly)
        chart_palette: Series colors, assigned to series by position (wrapping)
        log_level: Root log level name
        log_json: Emit JSON structured logs on the console
        log_file: Optional file receiving JSON logs
    """

    default_interval: str = "weekly"
    chart_palette: tuple[str, ...] = field(default_factory=lambda: chart_constants.PALETTE)
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Validate dashboard configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.default_interval not in VALID_INTERVALS:
            raise ConfigurationError(
                f"DASHBOARD_DEFAULT_INTERVAL must be one of {', '.join(VALID_INTERVALS)}: {self.default_interval}"
            )

        if not self.chart_palette:
            raise ConfigurationError("DASHBOARD_CHART_PALETTE must contain at least one color")

        for color in self.chart_palette:
            if not _HEX_COLOR.match(color):
                raise ConfigurationError(f"DASHBOARD_CHART_PALETTE contains an invalid color: {color!r}")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}: {self.log_level}")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false): {raw!r}")


class SecureConfig:
    """
    Centralized configuration manager.

    Loads and validates application configuration from environment variables
    (and a local .env file, when present).
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_dashboard_config(self) -> DashboardConfig:
        """
        Get validated dashboard configuration.

        Returns:
            DashboardConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        interval = os.getenv("DASHBOARD_DEFAULT_INTERVAL", "weekly").strip().lower()

        raw_palette = os.getenv("DASHBOARD_CHART_PALETTE")
        if raw_palette:
            palette = tuple(color.strip() for color in raw_palette.split(",") if color.strip())
        else:
            palette = chart_constants.PALETTE

        log_file = os.getenv("LOG_FILE")

        return DashboardConfig(
            default_interval=interval,
            chart_palette=palette,
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            log_json=_parse_bool("LOG_JSON", os.getenv("LOG_JSON", "false")),
            log_file=Path(log_file) if log_file else None,
        )


# Convenience function for getting configuration
_config_instance = None


def get_config() -> SecureConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        SecureConfig: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SecureConfig()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration instance (used by tests)."""
    global _config_instance
    _config_instance = None


def validate_config_on_startup() -> DashboardConfig:
    """
    Validate configuration at application startup.

    Call this in your main() function to fail fast if configuration is invalid.

    Returns:
        DashboardConfig: The validated configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    return get_config().get_dashboard_config()
