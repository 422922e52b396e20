"""Team breakdown selection and chart assembly

Turns an organization metrics response into the list of charts the
organization dashboard shows:

1. Select entities - the organization alone, or the selected teams when the
   team breakdown is enabled
2. Align - one column per selected entity for every metric label
3. Classify - bar/line and duration formatting from the reference metric
4. Suppress - metrics where no selected entity recorded any value are dropped
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from devinsights.dashboards.charts.aligner import AlignedChartRow, KeyedSeries, align, has_values
from devinsights.dashboards.charts.classifier import ChartPresentation, classify
from devinsights.domain.constants import chart_constants
from devinsights.domain.metrics import EntityKind, EntityMetricBundle, OrganizationMetrics
from devinsights.utils.formatting import slugify_series_key

logger = logging.getLogger(__name__)


@dataclass
class BreakdownSelection:
    """
    UI state of the team breakdown controls.

    Attributes:
        show_breakdown: Whether per-team lines replace the organization line
        selected_ids: Team ids currently ticked
    """

    show_breakdown: bool = False
    selected_ids: set[str] = field(default_factory=set)

    def set_breakdown(self, enabled: bool, available_ids: Iterable[str]) -> None:
        """
        Enable or disable the breakdown.

        Enabling selects every available team so the chart is never empty by
        default; disabling keeps the previous selection for the next time.
        """
        self.show_breakdown = enabled
        available = set(available_ids)
        if enabled and available:
            self.selected_ids = available

    def toggle(self, entity_id: str) -> None:
        """Tick or untick one team."""
        if entity_id in self.selected_ids:
            self.selected_ids.discard(entity_id)
        else:
            self.selected_ids.add(entity_id)

    def requested_team_ids(self) -> list[str] | None:
        """Team ids to request from the metrics API, or None for organization totals only."""
        if self.show_breakdown and self.selected_ids:
            return sorted(self.selected_ids)
        return None


@dataclass(frozen=True)
class SeriesLegend:
    """Legend entry for one chart column."""

    key: str
    display_name: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "display_name": self.display_name, "color": self.color}


@dataclass
class ChartDataset:
    """
    Everything the charting component needs for one metric.

    Attributes:
        category: Category name the metric belongs to
        label: Metric label (chart title)
        description: Help text from the matching snapshot metric
        presentation: Bar/line and duration formatting
        rows: Aligned rows (one per date)
        series: Legend entries, one per value column
    """

    category: str
    label: str
    presentation: ChartPresentation
    rows: list[AlignedChartRow]
    series: list[SeriesLegend]
    description: str = ""

    def values_for(self, series_key: str) -> list[Any]:
        return [row.get(series_key) for row in self.rows]

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "label": self.label,
            "description": self.description,
            **self.presentation.to_dict(),
            "rows": [dict(row) for row in self.rows],
            "series": [legend.to_dict() for legend in self.series],
        }


def select_entities(
    bundles: Sequence[EntityMetricBundle],
    selected_ids: Iterable[str],
    show_breakdown: bool,
) -> list[EntityMetricBundle]:
    """
    Resolve which entities feed the chart.

    Args:
        bundles: Organization bundle plus any team breakdown bundles
        selected_ids: Ticked team ids (pre-populated with all ids when the breakdown is enabled)
        show_breakdown: Whether the team breakdown is enabled

    Returns:
        [organization] when the breakdown is off or no team breakdown was
        returned; otherwise the selected team bundles in input order
    """
    organization = [b for b in bundles if b.kind is EntityKind.ORGANIZATION][:1]
    if not show_breakdown:
        return organization

    teams = [b for b in bundles if b.kind is not EntityKind.ORGANIZATION]
    if not teams:
        return organization

    selected = set(selected_ids)
    return [team for team in teams if team.entity_id in selected]


def assign_series_keys(entities: Sequence[EntityMetricBundle]) -> list[str]:
    """
    Stable, unique column keys for entities ("Team A" -> "team_a").

    Entities whose names collide get their id appended.
    """
    keys: list[str] = []
    for entity in entities:
        if entity.kind is EntityKind.ORGANIZATION:
            base = chart_constants.ORGANIZATION_SERIES_KEY
        else:
            base = slugify_series_key(entity.entity_name) or slugify_series_key(entity.entity_id)

        key = base
        if key in keys:
            key = f"{base}_{slugify_series_key(entity.entity_id)}"
        keys.append(key)
    return keys


def build_breakdown_charts(
    metrics: OrganizationMetrics,
    selection: BreakdownSelection,
    palette: Sequence[str] = chart_constants.PALETTE,
) -> list[ChartDataset]:
    """
    Build every chart for the organization dashboard.

    Metric order follows the organization's categories. A metric is kept only
    when at least one selected entity has a non-None value on the aligned axis.

    Args:
        metrics: Organization metrics with optional team breakdown
        selection: Current breakdown state
        palette: Series colors, assigned by column position (wrapping)

    Returns:
        Chart datasets, never containing an all-empty chart
    """
    entities = select_entities(metrics.all_bundles(), selection.selected_ids, selection.show_breakdown)
    keys = assign_series_keys(entities)
    organization = metrics.organization

    charts: list[ChartDataset] = []
    suppressed = 0

    for category in organization.graph_categories:
        for metric in category.metrics:
            keyed: list[KeyedSeries] = []
            legends: list[SeriesLegend] = []
            for entity, key in zip(entities, keys):
                entity_metric = entity.find_graph_metric(metric.label)
                if entity_metric is None:
                    continue
                keyed.append(KeyedSeries(key, entity_metric))
                legends.append(
                    SeriesLegend(key=key, display_name=entity.entity_name, color=palette[len(legends) % len(palette)])
                )

            rows = align(keyed)
            if not has_values(rows):
                suppressed += 1
                continue

            charts.append(
                ChartDataset(
                    category=category.name,
                    label=metric.label,
                    description=organization.describe(metric.label),
                    presentation=classify(metric),
                    rows=rows,
                    series=legends,
                )
            )

    logger.info(
        f"Built {len(charts)} charts for {len(entities)} entities ({suppressed} empty metrics suppressed)",
        extra={
            "extra_fields": {
                "chart_count": len(charts),
                "entity_count": len(entities),
                "suppressed_count": suppressed,
                "show_breakdown": selection.show_breakdown,
            }
        },
    )
    return charts


def group_by_category(charts: Iterable[ChartDataset]) -> dict[str, list[ChartDataset]]:
    """Group charts under their category name, preserving order. Empty categories never appear."""
    grouped: dict[str, list[ChartDataset]] = {}
    for chart in charts:
        grouped.setdefault(chart.category, []).append(chart)
    return grouped
