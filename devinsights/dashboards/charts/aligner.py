"""Time series alignment for multi-series charts

Merges independent date-keyed series onto one sorted date axis:
- Union of every date seen in any series, in calendar order
- One column per series key, first point of the matching entry
- Explicit None where a series has no entry (or an empty entry) for a date

None and 0 are never conflated: 0 is a recorded value, None is absence.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, NamedTuple

import pandas as pd

from devinsights.domain.metrics import MetricSeries
from devinsights.utils.datetime_utils import parse_metric_date
from devinsights.utils.error_handling import log_and_continue

logger = logging.getLogger(__name__)

DATE_COLUMN = "date"

AlignedChartRow = dict[str, Any]


class KeyedSeries(NamedTuple):
    """A metric series tagged with the column key it is charted under."""

    series_key: str
    metric: MetricSeries


def _date_sort_key(date_str: str) -> tuple[int, datetime, str]:
    """Calendar order first; unparseable dates go last, ordered by string."""
    try:
        parsed = parse_metric_date(date_str)
    except ValueError as e:
        log_and_continue(logger, e, context={"date": date_str}, error_type="Date parsing")
        parsed = None

    if parsed is None:
        return (1, datetime.min, date_str)
    return (0, parsed, date_str)


def _first_values_by_date(metric: MetricSeries) -> dict[str, float | None]:
    """Map each date to the first point value of its first entry."""
    values: dict[str, float | None] = {}
    for entry in metric.time_series:
        if entry.date in values:
            logger.debug(f"Duplicate date {entry.date} in '{metric.label}', keeping first occurrence")
            continue
        values[entry.date] = entry.first_value()
    return values


def align(series: Iterable[KeyedSeries | tuple[str, MetricSeries]]) -> list[AlignedChartRow]:
    """
    Align N series onto a single ascending date axis.

    Args:
        series: (series_key, MetricSeries) pairs; keys name the output columns

    Returns:
        One row per distinct date, ascending. Each row holds "date" plus one
        value per series key (None where that series has no data point).

    Example:
        >>> rows = align([KeyedSeries("team_a", team_a_prs), KeyedSeries("team_b", team_b_prs)])
        >>> rows[0]
        {'date': '2024-01-01', 'team_a': 3.0, 'team_b': None}
    """
    columns: dict[str, dict[str, float | None]] = {}
    all_dates: set[str] = set()

    for series_key, metric in series:
        if series_key in columns:
            logger.warning(f"Series key '{series_key}' supplied twice, ignoring later series '{metric.label}'")
            continue
        values = _first_values_by_date(metric)
        columns[series_key] = values
        all_dates.update(values)

    if not columns:
        return []

    rows: list[AlignedChartRow] = []
    for date in sorted(all_dates, key=_date_sort_key):
        row: AlignedChartRow = {DATE_COLUMN: date}
        for series_key, values in columns.items():
            row[series_key] = values.get(date)
        rows.append(row)

    return rows


def series_keys(rows: Sequence[AlignedChartRow]) -> list[str]:
    """Value columns of aligned rows, in column order."""
    if not rows:
        return []
    return [key for key in rows[0] if key != DATE_COLUMN]


def has_values(rows: Sequence[AlignedChartRow], keys: Iterable[str] | None = None) -> bool:
    """
    Check whether any of the given columns holds a recorded (non-None) value.

    Args:
        rows: Aligned rows
        keys: Columns to inspect (default: all value columns)
    """
    keys = list(keys) if keys is not None else series_keys(rows)
    return any(row.get(key) is not None for row in rows for key in keys)


def pivot_point_keys(metric: MetricSeries) -> list[AlignedChartRow]:
    """
    Chart one metric with each distinct point key as its own column.

    Used for single-entity charts where one entry carries several keyed
    values per date (e.g. "opened" and "merged").

    Returns:
        One row per distinct date, ascending, None where a key is missing on a date
    """
    keys = metric.point_keys()
    first_entries: dict[str, dict[str, float]] = {}
    for entry in metric.time_series:
        if entry.date in first_entries:
            continue
        values: dict[str, float] = {}
        for point in entry.points:
            values.setdefault(point.key, point.value)
        first_entries[entry.date] = values

    rows: list[AlignedChartRow] = []
    for date in sorted(first_entries, key=_date_sort_key):
        row: AlignedChartRow = {DATE_COLUMN: date}
        for key in keys:
            row[key] = first_entries[date].get(key)
        rows.append(row)
    return rows


def aligned_rows_to_frame(rows: Sequence[AlignedChartRow]) -> pd.DataFrame:
    """
    Convert aligned rows to a DataFrame indexed by date (for CSV/table export).

    Absent values become NaN in the frame.

    Args:
        rows: Output of align() or pivot_point_keys()

    Returns:
        pd.DataFrame: One float column per series key
    """
    if not rows:
        return pd.DataFrame(columns=[DATE_COLUMN]).set_index(DATE_COLUMN)

    df = pd.DataFrame.from_records(list(rows), columns=[DATE_COLUMN, *series_keys(rows)])
    df = df.set_index(DATE_COLUMN)
    return df.astype(float)
