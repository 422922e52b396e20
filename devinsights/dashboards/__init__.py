"""
Dashboard Core - Chart datasets and panel navigation

This package contains:
    - charts: time-series alignment, chart classification, team breakdown assembly
    - carousel: per-panel graph navigation
    - session: per-view state (date range, carousels, breakdown, expanded groups)
    - data_loader: metrics payload loading for offline chart generation

Usage:
    from devinsights.dashboards.charts.breakdown import BreakdownSelection, build_breakdown_charts

    charts = build_breakdown_charts(metrics, BreakdownSelection())
"""

__all__ = []
