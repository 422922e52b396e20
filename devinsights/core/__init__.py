"""
Core Infrastructure - Configuration and Logging

This package provides centralized infrastructure utilities that should be used
throughout the dashboard core instead of direct library calls.

Usage:
    from devinsights.core import get_config, setup_logging_from_config

    config = get_config().get_dashboard_config()
    setup_logging_from_config(config)
"""

from ..secure_config import (
    ConfigurationError,
    DashboardConfig,
    SecureConfig,
    get_config,
    reset_config,
    validate_config_on_startup,
)
from .logging_config import (
    JSONFormatter,
    setup_logging,
    setup_logging_from_config,
)

__all__ = [
    # Configuration
    "get_config",
    "reset_config",
    "validate_config_on_startup",
    "ConfigurationError",
    "DashboardConfig",
    "SecureConfig",
    # Logging
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_config",
]
