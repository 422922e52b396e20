"""Single-entity panel charts

A carousel panel charts one metric of one member, team or organization. Each
distinct point key becomes its own column (e.g. "opened" and "merged"),
labelled with the humanized key and colored from the palette by position.
"""

from collections.abc import Sequence

from devinsights.dashboards.charts.aligner import pivot_point_keys, series_keys
from devinsights.dashboards.charts.breakdown import ChartDataset, SeriesLegend
from devinsights.dashboards.charts.classifier import classify
from devinsights.dashboards.charts.graphs import DisplayableGraph
from devinsights.domain.constants import chart_constants
from devinsights.utils.formatting import humanize_series_key


def build_panel_chart(graph: DisplayableGraph, palette: Sequence[str] = chart_constants.PALETTE) -> ChartDataset:
    """
    Build the chart dataset for one carousel graph.

    Args:
        graph: Graph currently shown by the panel
        palette: Series colors, assigned by column position (wrapping)

    Returns:
        ChartDataset with one column per point key

    Example:
        >>> chart = build_panel_chart(graph)
        >>> [legend.display_name for legend in chart.series]
        ['Opened', 'Merged']
    """
    rows = pivot_point_keys(graph.metric)
    legends = [
        SeriesLegend(key=key, display_name=humanize_series_key(key), color=palette[position % len(palette)])
        for position, key in enumerate(series_keys(rows))
    ]
    return ChartDataset(
        category=graph.category,
        label=graph.label,
        description=graph.description,
        presentation=classify(graph.metric),
        rows=rows,
        series=legends,
    )
