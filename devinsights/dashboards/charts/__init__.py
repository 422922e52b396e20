"""Chart dataset assembly"""

from devinsights.dashboards.charts.aligner import KeyedSeries, align, aligned_rows_to_frame, pivot_point_keys
from devinsights.dashboards.charts.breakdown import (
    BreakdownSelection,
    ChartDataset,
    SeriesLegend,
    build_breakdown_charts,
    select_entities,
)
from devinsights.dashboards.charts.classifier import ChartPresentation, classify
from devinsights.dashboards.charts.graphs import DisplayableGraph, displayable_graphs
from devinsights.dashboards.charts.panel import build_panel_chart

__all__ = [
    "KeyedSeries",
    "align",
    "aligned_rows_to_frame",
    "pivot_point_keys",
    "BreakdownSelection",
    "ChartDataset",
    "SeriesLegend",
    "build_breakdown_charts",
    "select_entities",
    "ChartPresentation",
    "classify",
    "DisplayableGraph",
    "displayable_graphs",
    "build_panel_chart",
]
