#!/usr/bin/env python3
"""
Error Handling Utility Module

Provides reusable error handling patterns for metric payloads that may be
sparse or malformed. Malformed data must never break a chart, so the core
logs the problem with structured context and carries on.

This module provides two utilities:
1. log_and_continue() - Log error and continue execution (for expected failures)
2. log_and_return_default() - Log error and return a default value
"""

import logging
from typing import Any


def log_and_continue(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> None:
    """
    Log an error with structured context and continue execution gracefully.

    Use this when encountering expected errors that should not halt execution
    (e.g., an unparseable date on one time-series entry).

    Args:
        logger: Logger instance from logging.getLogger(__name__)
        error: The caught exception
        context: Structured data about what failed (series_key, date, etc.)
        error_type: Human-readable description of the operation

    Example:
        try:
            parsed = parse_metric_date(entry.date)
        except ValueError as e:
            log_and_continue(logger, e, context={"date": entry.date}, error_type="Date parsing")
            continue
    """
    logger.warning(
        f"{error_type} failed: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
        },
    )


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log an error and return a default value (for functions that need to return something).

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        default_value: Value to return on error (None, [], {}, etc.)
        error_type: Human-readable description

    Returns:
        default_value

    Example:
        try:
            return float(raw_value)
        except (TypeError, ValueError) as e:
            return log_and_return_default(
                logger, e,
                context={"key": point_key},
                default_value=None,
                error_type="Point value parsing"
            )
    """
    logger.warning(
        f"{error_type} failed, returning default value: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
            "default_value": str(default_value),
        },
    )
    return default_value
