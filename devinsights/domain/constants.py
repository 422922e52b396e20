#!/usr/bin/env python3
"""
Application Constants

Centralized constants for chart classification, series coloring and duration
formatting. Provides type-safe, immutable values used across the dashboard core.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartConstants:
    """
    Chart presentation constants.

    Attributes:
        BAR_KIND_KEYWORDS: Substrings of a metric kind that select a bar chart
        DURATION_UNITS: Units whose values are seconds and are formatted as durations
        PALETTE: Default series colors, assigned by position and wrapping around
        ORGANIZATION_SERIES_KEY: Series key used when the organization total is charted

    Example:
        >>> chart_constants.BAR_KIND_KEYWORDS
        ('bar', 'count', 'total')
    """

    BAR_KIND_KEYWORDS: tuple[str, ...] = ("bar", "count", "total")
    """Kinds containing any of these (case-insensitive) render as bars"""

    DURATION_UNITS: tuple[str, ...] = ("seconds", "time")
    """Units rendered with duration formatting"""

    PALETTE: tuple[str, ...] = (
        "#8884d8",
        "#82ca9d",
        "#ffc658",
        "#ff7300",
        "#00ff00",
        "#ff00ff",
        "#00ffff",
    )
    """Default series colors"""

    ORGANIZATION_SERIES_KEY: str = "organization"
    """Series key for the organization-level line"""


@dataclass(frozen=True)
class DurationUnits:
    """
    Seconds per duration unit, coarsest last.

    Example:
        >>> duration_units.SECONDS_PER_HOUR
        3600
    """

    SECONDS_PER_MINUTE: int = 60
    SECONDS_PER_HOUR: int = 3600
    SECONDS_PER_DAY: int = 86400


@dataclass(frozen=True)
class LocFormat:
    """Lines-of-code abbreviation threshold."""

    THOUSANDS_THRESHOLD: int = 1000


chart_constants = ChartConstants()
duration_units = DurationUnits()
loc_format = LocFormat()

__all__ = [
    "ChartConstants",
    "DurationUnits",
    "LocFormat",
    "chart_constants",
    "duration_units",
    "loc_format",
]
