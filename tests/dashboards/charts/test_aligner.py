"""
Tests for time series alignment
"""

import math

import pandas as pd

from devinsights.dashboards.charts.aligner import (
    KeyedSeries,
    align,
    aligned_rows_to_frame,
    has_values,
    pivot_point_keys,
    series_keys,
)
from devinsights.domain.metrics import MetricSeries


class TestAlign:
    """Test align() date union and gap filling"""

    def test_two_teams_disjoint_dates(self, series_factory):
        """Test the two-team example: each team only reports on its own date"""
        team_a = series_factory("PRs", {"2024-01-01": [("prs", 3)]})
        team_b = series_factory("PRs", {"2024-01-02": [("prs", 5)]})

        rows = align([KeyedSeries("team_a", team_a), KeyedSeries("team_b", team_b)])

        assert rows == [
            {"date": "2024-01-01", "team_a": 3, "team_b": None},
            {"date": "2024-01-02", "team_a": None, "team_b": 5},
        ]

    def test_no_series_returns_empty(self):
        """Test zero input series produce no rows"""
        assert align([]) == []

    def test_every_date_once_in_ascending_order(self, series_factory):
        """Test the union of dates appears exactly once, sorted"""
        a = series_factory("A", {"2024-01-03": 1, "2024-01-01": 2})
        b = series_factory("A", {"2024-01-02": 3, "2024-01-03": 4})
        c = series_factory("A", {"2024-01-05": 5})

        rows = align([("a", a), ("b", b), ("c", c)])

        assert [row["date"] for row in rows] == ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-05"]

    def test_zero_is_kept_and_missing_is_none(self, series_factory):
        """Test a recorded 0 stays 0 while a missing entry becomes None"""
        a = series_factory("A", {"2024-01-01": 0, "2024-01-02": 4})
        b = series_factory("A", {"2024-01-02": 0})

        rows = align([("a", a), ("b", b)])

        assert rows[0]["a"] == 0
        assert rows[0]["a"] is not None
        assert rows[0]["b"] is None
        assert rows[1]["b"] == 0

    def test_entry_without_points_is_none(self, series_factory):
        """Test an entry with zero points is treated as absent"""
        a = series_factory("A", {"2024-01-01": None, "2024-01-02": 2})

        rows = align([("a", a)])

        assert rows[0] == {"date": "2024-01-01", "a": None}
        assert rows[1] == {"date": "2024-01-02", "a": 2}

    def test_first_point_wins(self, series_factory):
        """Test only the first point of an entry is charted"""
        a = series_factory("A", {"2024-01-01": [("opened", 7), ("merged", 2)]})

        rows = align([("a", a)])

        assert rows == [{"date": "2024-01-01", "a": 7}]

    def test_duplicate_date_keeps_first_entry(self):
        """Test a repeated date within one series honours the first occurrence"""
        metric = MetricSeries.from_dict(
            {
                "label": "A",
                "time_series": [
                    {"date": "2024-01-01", "data": [{"key": "v", "value": 1}]},
                    {"date": "2024-01-01", "data": [{"key": "v", "value": 9}]},
                ],
            }
        )

        rows = align([("a", metric)])

        assert rows == [{"date": "2024-01-01", "a": 1}]

    def test_empty_series_is_all_none_column(self, series_factory):
        """Test a series without entries still appears as a column"""
        a = series_factory("A", {"2024-01-01": 1, "2024-01-02": 2})
        empty = MetricSeries(label="A")

        rows = align([("a", a), ("empty", empty)])

        assert [row["empty"] for row in rows] == [None, None]

    def test_only_empty_series(self):
        """Test series with no entries contribute no dates"""
        assert align([("a", MetricSeries(label="A"))]) == []

    def test_calendar_order_across_formats(self, series_factory):
        """Test dates are ordered by calendar, not by string"""
        a = series_factory("A", {"2024-01-10": 1, "2024-01-09T23:00:00Z": 2, "2024-01-09T22:00:00-03:00": 3})

        rows = align([("a", a)])

        # 22:00-03:00 is 01:00Z on the 10th
        assert [row["date"] for row in rows] == ["2024-01-09T23:00:00Z", "2024-01-10", "2024-01-09T22:00:00-03:00"]

    def test_unparseable_dates_sort_last(self, series_factory):
        """Test malformed dates do not raise and are placed after valid ones"""
        a = series_factory("A", {"not-a-date": 1, "2024-01-02": 2, "2024-01-01": 3})

        rows = align([("a", a)])

        assert [row["date"] for row in rows] == ["2024-01-01", "2024-01-02", "not-a-date"]
        assert rows[-1]["a"] == 1

    def test_duplicate_series_key_keeps_first(self, series_factory):
        """Test a repeated series key does not overwrite the first series"""
        first = series_factory("A", {"2024-01-01": 1})
        second = series_factory("A", {"2024-01-02": 2})

        rows = align([("a", first), ("a", second)])

        assert rows == [{"date": "2024-01-01", "a": 1}]


class TestHelpers:
    """Test series_keys() and has_values()"""

    def test_series_keys(self):
        """Test value columns exclude the date column"""
        rows = [{"date": "2024-01-01", "x": 1, "y": None}]
        assert series_keys(rows) == ["x", "y"]

    def test_series_keys_empty(self):
        assert series_keys([]) == []

    def test_has_values_detects_zero(self):
        """Test a recorded 0 counts as a value"""
        rows = [{"date": "2024-01-01", "x": None, "y": 0}]
        assert has_values(rows) is True

    def test_has_values_all_none(self):
        rows = [{"date": "2024-01-01", "x": None}, {"date": "2024-01-02", "x": None}]
        assert has_values(rows) is False

    def test_has_values_subset_of_keys(self):
        rows = [{"date": "2024-01-01", "x": None, "y": 3}]
        assert has_values(rows, keys=["x"]) is False


class TestPivotPointKeys:
    """Test single-metric pivot of point keys into columns"""

    def test_each_key_becomes_column(self, series_factory):
        """Test sparse point keys are filled with None"""
        metric = series_factory(
            "PR Activity",
            {
                "2024-01-02": [("opened", 4)],
                "2024-01-01": [("opened", 2), ("merged", 1)],
            },
        )

        rows = pivot_point_keys(metric)

        assert rows == [
            {"date": "2024-01-01", "opened": 2, "merged": 1},
            {"date": "2024-01-02", "opened": 4, "merged": None},
        ]

    def test_empty_metric(self):
        assert pivot_point_keys(MetricSeries(label="A")) == []


class TestAlignedRowsToFrame:
    """Test DataFrame export"""

    def test_frame_indexed_by_date(self):
        """Test rows become a float frame with NaN for absence"""
        rows = [
            {"date": "2024-01-01", "team_a": 3, "team_b": None},
            {"date": "2024-01-02", "team_a": None, "team_b": 0},
        ]

        df = aligned_rows_to_frame(rows)

        assert list(df.index) == ["2024-01-01", "2024-01-02"]
        assert list(df.columns) == ["team_a", "team_b"]
        assert df.loc["2024-01-01", "team_a"] == 3.0
        assert math.isnan(df.loc["2024-01-01", "team_b"])
        assert df.loc["2024-01-02", "team_b"] == 0.0

    def test_empty_rows(self):
        df = aligned_rows_to_frame([])
        assert isinstance(df, pd.DataFrame)
        assert df.empty
