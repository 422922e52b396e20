"""
Metric value formatting

Pure helpers that turn raw metric numbers into display strings:
    - format_duration: seconds -> "45s", "5m", "2h", "3d"
    - format_metric_value: unit-aware formatting (durations, counts, LOC, percent)
    - humanize_series_key: "prs_merged" -> "Prs Merged"
    - slugify_series_key: "Team A" -> "team_a"
"""

import re

from devinsights.domain.constants import chart_constants, duration_units, loc_format

_NON_WORD = re.compile(r"[^0-9a-z]+")


def format_duration(seconds: float) -> str:
    """
    Format a duration using the coarsest unit whose truncated value is at least 1.

    Cascades seconds -> minutes -> hours -> days.

    Args:
        seconds: Duration in seconds

    Returns:
        Compact duration string

    Examples:
        >>> format_duration(45)
        '45s'
        >>> format_duration(7200)
        '2h'
        >>> format_duration(259200)
        '3d'
        >>> format_duration(5400)
        '1h'
    """
    days = int(seconds / duration_units.SECONDS_PER_DAY)
    if days >= 1:
        return f"{days}d"

    hours = int(seconds / duration_units.SECONDS_PER_HOUR)
    if hours >= 1:
        return f"{hours}h"

    minutes = int(seconds / duration_units.SECONDS_PER_MINUTE)
    if minutes >= 1:
        return f"{minutes}m"

    return f"{int(seconds)}s"


def _with_separators(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_metric_value(value: float | None, unit: str | None) -> str:
    """
    Format a metric value based on its unit.

    Args:
        value: The metric value (None renders as "-")
        unit: Unit of measurement ("seconds", "time", "count", "loc", "percent", ...)

    Returns:
        Formatted value string

    Examples:
        >>> format_metric_value(3600, "seconds")
        '1h'
        >>> format_metric_value(1234, "count")
        '1,234'
        >>> format_metric_value(1500, "loc")
        '1.5k'
        >>> format_metric_value(75.5, "percent")
        '75.5%'
    """
    if value is None:
        return "-"

    if unit in chart_constants.DURATION_UNITS:
        return format_duration(value)

    if unit == "loc" and value >= loc_format.THOUSANDS_THRESHOLD:
        return f"{value / 1000:.1f}k"

    if unit == "percent":
        if float(value).is_integer():
            return f"{int(value)}%"
        return f"{value:.1f}%"

    return _with_separators(value)


def humanize_series_key(key: str) -> str:
    """
    Turn a data-point key into a legend label.

    Examples:
        >>> humanize_series_key("prs_merged")
        'Prs Merged'
    """
    return " ".join(word.capitalize() for word in key.replace("_", " ").split())


def slugify_series_key(name: str) -> str:
    """
    Turn an entity name into a stable series key.

    Examples:
        >>> slugify_series_key("Team A")
        'team_a'
        >>> slugify_series_key("  Platform / Infra ")
        'platform_infra'
    """
    return _NON_WORD.sub("_", name.lower()).strip("_")
