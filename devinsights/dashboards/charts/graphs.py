"""Displayable graph lists for carousel panels

Flattens an entity's graph categories into the list of graphs a carousel pages
through. Metrics with no recorded point at all are left out; a recorded 0 is data.
"""

from dataclasses import dataclass

from devinsights.domain.metrics import EntityMetricBundle, MetricSeries


@dataclass(frozen=True)
class DisplayableGraph:
    """
    One graph in a carousel.

    Attributes:
        metric: The metric to chart
        category: Name of the category it came from
        description: Snapshot description of the same-label metric ('' if none)
    """

    metric: MetricSeries
    category: str
    description: str = ""

    @property
    def label(self) -> str:
        return self.metric.label


def displayable_graphs(bundle: EntityMetricBundle) -> list[DisplayableGraph]:
    """
    List every graph of a bundle that has data, in category then metric order.

    Args:
        bundle: Member, team or organization metrics

    Returns:
        Graphs with at least one entry carrying at least one point
    """
    graphs = []
    for category in bundle.graph_categories:
        for metric in category.metrics:
            if not metric.has_data():
                continue
            graphs.append(
                DisplayableGraph(metric=metric, category=category.name, description=bundle.describe(metric.label))
            )
    return graphs


def graph_signature(graphs: list[DisplayableGraph]) -> tuple[tuple[str, str], ...]:
    """Identity of a graph list, used to detect a change of contents between refreshes."""
    return tuple((graph.category, graph.label) for graph in graphs)
