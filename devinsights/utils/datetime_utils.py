#!/usr/bin/env python3
"""
Datetime Utility Functions

Centralized date parsing for metric time series and query parameters.

Handles common patterns:
- Date-only strings ("2024-01-01")
- ISO timestamps with 'Z' suffix or explicit offsets
- Calendar ordering of mixed date formats
"""

from datetime import UTC, date, datetime


def parse_metric_date(date_str: str | None) -> datetime | None:
    """
    Parse a time-series date string to a naive UTC datetime.

    Accepts the formats the metrics API has been seen to emit:
    - "2024-01-01" (date only)
    - "2024-01-01T10:00:00Z" (UTC with Z)
    - "2024-01-01T10:00:00+02:00" (explicit offset, converted to UTC)
    - "2024-01-01T10:00:00" (naive, assumed UTC)

    Args:
        date_str: Date or timestamp string, or None

    Returns:
        Naive datetime in UTC, or None if input is None/empty

    Raises:
        ValueError: If the string is not a recognizable ISO date

    Examples:
        >>> parse_metric_date("2024-01-02")
        datetime.datetime(2024, 1, 2, 0, 0)

        >>> parse_metric_date("2024-01-02T03:00:00+02:00")
        datetime.datetime(2024, 1, 2, 1, 0)
    """
    if not date_str:
        return None

    if not isinstance(date_str, str):
        raise ValueError(f"Date must be a string, got {type(date_str)}")

    try:
        normalized = date_str.strip()
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        parsed = datetime.fromisoformat(normalized)
    except ValueError as e:
        raise ValueError(f"Invalid metric date format: {date_str}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)

    return parsed


def parse_query_date(date_str: str) -> date:
    """
    Parse a YYYY-MM-DD query parameter.

    Args:
        date_str: Date string in YYYY-MM-DD format

    Returns:
        date object

    Raises:
        ValueError: If the string is not a YYYY-MM-DD date
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValueError(f"Date must be in YYYY-MM-DD format: {date_str!r}") from e
