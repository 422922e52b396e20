"""
Dashboard view session

Holds the state that outlives a single computation for as long as a dashboard
view is open: the requested date range, carousel positions, breakdown
selection and expanded groups. Owned by a single view; not shared.
"""

import logging
from dataclasses import dataclass, field

from devinsights.dashboards.carousel import CarouselPosition, CarouselState
from devinsights.dashboards.charts.breakdown import BreakdownSelection, ChartDataset, build_breakdown_charts
from devinsights.dashboards.charts.graphs import DisplayableGraph, displayable_graphs, graph_signature
from devinsights.dashboards.charts.panel import build_panel_chart
from devinsights.domain.constants import chart_constants
from devinsights.domain.metrics import EntityMetricBundle, MetricsQuery, OrganizationMetrics
from devinsights.secure_config import DashboardConfig

logger = logging.getLogger(__name__)


@dataclass
class PanelView:
    """The graph currently shown by one carousel panel, with its chart dataset."""

    graph: DisplayableGraph | None
    position: CarouselPosition | None
    chart: ChartDataset | None = None

    @property
    def is_empty(self) -> bool:
        return self.graph is None


@dataclass
class DashboardSession:
    """
    Per-view dashboard state.

    Attributes:
        query: Date range and interval currently requested (None until set)
        carousels: One navigator per panel key
        breakdown: Team breakdown selection
        expanded: Ids of expanded groups (e.g. repositories in the open PR list)
        panels: Graph list per panel key, as of the last refresh
        palette: Chart series colors
        default_interval: Interval used when a date range is applied without one
    """

    query: MetricsQuery | None = None
    carousels: CarouselState = field(default_factory=CarouselState)
    breakdown: BreakdownSelection = field(default_factory=BreakdownSelection)
    expanded: set[str] = field(default_factory=set)
    panels: dict[str, list[DisplayableGraph]] = field(default_factory=dict)
    palette: tuple[str, ...] = chart_constants.PALETTE
    default_interval: str = "weekly"

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "DashboardSession":
        return cls(palette=config.chart_palette, default_interval=config.default_interval)

    def apply_query(self, query: MetricsQuery) -> bool:
        """
        Switch to a new date range / interval.

        Returns:
            True if the query changed (every carousel is reset), False otherwise
        """
        if query == self.query:
            return False

        logger.info(
            f"Metrics query changed to {query.start_date}..{query.end_date} ({query.interval})",
            extra={"extra_fields": query.to_params()},
        )
        self.query = query
        self.carousels.reset_all()
        return True

    def apply_date_range(self, start_date: str, end_date: str, interval: str | None = None) -> bool:
        """Build a MetricsQuery (default interval when none is given) and apply it."""
        return self.apply_query(MetricsQuery(start_date, end_date, interval or self.default_interval))

    def refresh_panel(self, key: str, bundle: EntityMetricBundle) -> list[DisplayableGraph]:
        """
        Recompute a panel's graph list from freshly received metrics.

        The list is stored for the panel and its navigator is invalidated
        against it.

        Returns:
            The displayable graphs (empty when the entity has no metric data)
        """
        graphs = displayable_graphs(bundle)
        self.panels[key] = graphs
        self.carousels.invalidate(key, len(graphs), signature=graph_signature(graphs))
        return graphs

    def panel_view(self, key: str) -> PanelView:
        """Graph and chart at the panel's current position (empty view before a refresh or with no graphs)."""
        graphs = self.panels.get(key, [])
        index = self.carousels.current(key)
        if index is None or index >= len(graphs):
            return PanelView(graph=None, position=None)

        graph = graphs[index]
        return PanelView(
            graph=graph,
            position=self.carousels.position(key),
            chart=build_panel_chart(graph, palette=self.palette),
        )

    def set_breakdown(self, enabled: bool, metrics: OrganizationMetrics) -> None:
        self.breakdown.set_breakdown(enabled, metrics.team_ids())

    def organization_charts(self, metrics: OrganizationMetrics) -> list[ChartDataset]:
        """Charts for the organization overview using the current breakdown selection."""
        return build_breakdown_charts(metrics, self.breakdown, palette=self.palette)

    def toggle_expansion(self, group_id: str) -> bool:
        """
        Expand or collapse a group.

        Returns:
            True if the group is now expanded
        """
        if group_id in self.expanded:
            self.expanded.discard(group_id)
            return False
        self.expanded.add(group_id)
        return True

    def is_expanded(self, group_id: str) -> bool:
        return group_id in self.expanded
