"""
Domain Models - Type-safe data structures for metrics and conversations

This package contains dataclasses representing business domain concepts:
    - metrics: MetricSeries, EntityMetricBundle, OrganizationMetrics, MetricsQuery
    - conversation: FieldType, TemplateField, ConversationTemplate, ValidationResult
    - constants: chart and formatting constants

Usage:
    from devinsights.domain.metrics import OrganizationMetrics

    metrics = OrganizationMetrics.from_dict(response_body)
    for team in metrics.teams_breakdown:
        print(team.entity_name, len(team.all_graph_metrics()))
"""

from .conversation import ConversationTemplate, FieldType, TemplateField, ValidationResult
from .metrics import (
    DataPoint,
    EntityKind,
    EntityMetricBundle,
    GraphCategory,
    MetricSeries,
    MetricsQuery,
    OrganizationMetrics,
    SnapshotCategory,
    SnapshotMetric,
    TimeSeriesEntry,
)

__all__ = [
    # Metrics domain
    "DataPoint",
    "TimeSeriesEntry",
    "MetricSeries",
    "SnapshotMetric",
    "GraphCategory",
    "SnapshotCategory",
    "EntityKind",
    "EntityMetricBundle",
    "OrganizationMetrics",
    "MetricsQuery",
    # Conversation domain
    "FieldType",
    "TemplateField",
    "ConversationTemplate",
    "ValidationResult",
]
