"""
Metric domain models

Typed representation of the metric payloads returned for members, teams and
organizations:
    - DataPoint / TimeSeriesEntry / MetricSeries: date-keyed graph data
    - SnapshotMetric: point-in-time comparative value (entity vs. peers)
    - GraphCategory / SnapshotCategory: metrics grouped by rule category
    - EntityMetricBundle: everything charted for one member, team or organization
    - OrganizationMetrics: organization bundle plus optional per-team breakdown
    - MetricsQuery: date range and interval a bundle was requested for

Payload parsing accepts both the snake_case wire names and their camelCase
equivalents. Malformed values never raise; they are logged and dropped so the
rest of a chart still renders.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from devinsights.utils.datetime_utils import parse_query_date
from devinsights.utils.error_handling import log_and_continue, log_and_return_default

logger = logging.getLogger(__name__)

VALID_INTERVALS = ("daily", "weekly", "monthly")


def _pick(payload: dict[str, Any], *names: str, default: Any = None) -> Any:
    """Return the first present key among names (snake_case and camelCase aliases)."""
    for name in names:
        if name in payload and payload[name] is not None:
            return payload[name]
    return default


class EntityKind(Enum):
    """
    Owner of a metric bundle.

    Attributes:
        MEMBER: A single engineer
        TEAM: A team of members
        ORGANIZATION: The whole organization
    """

    MEMBER = "member"
    TEAM = "team"
    ORGANIZATION = "organization"


@dataclass(frozen=True)
class DataPoint:
    """One keyed value recorded on a date (e.g. key="prs_merged", value=3)."""

    key: str
    value: float

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "DataPoint | None":
        """
        Parse a data point, returning None when its value is not numeric.

        0 is a valid recorded value and is kept.
        """
        key = str(_pick(payload, "key", default=""))
        raw_value = payload.get("value")

        if isinstance(raw_value, bool):
            raw_value = None

        try:
            value = float(raw_value)  # type: ignore[arg-type]
        except (TypeError, ValueError) as e:
            return log_and_return_default(
                logger,
                e,
                context={"key": key, "value": repr(raw_value)},
                default_value=None,
                error_type="Data point parsing",
            )

        return cls(key=key, value=value)


@dataclass
class TimeSeriesEntry:
    """
    All points recorded for one date.

    Attributes:
        date: ISO date string as sent by the API
        points: Keyed values (cardinality may vary between entries)
    """

    date: str
    points: list[DataPoint] = field(default_factory=list)

    @property
    def has_points(self) -> bool:
        return len(self.points) > 0

    def first_value(self) -> float | None:
        """Value of the first point, or None when the entry has no points."""
        return self.points[0].value if self.points else None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "TimeSeriesEntry":
        raw_points = _pick(payload, "data", "points", default=[])
        points = []
        for raw_point in raw_points:
            if not isinstance(raw_point, dict):
                log_and_continue(
                    logger,
                    TypeError(f"expected object, got {type(raw_point).__name__}"),
                    context={"date": payload.get("date")},
                    error_type="Data point parsing",
                )
                continue
            point = DataPoint.from_dict(raw_point)
            if point is not None:
                points.append(point)
        return cls(date=str(_pick(payload, "date", default="")), points=points)


@dataclass
class MetricSeries:
    """
    A charted metric: a label plus a date-ordered time series.

    Attributes:
        label: Display label, also the identity used to match the same metric across entities
        kind: Declared metric type (drives bar vs. line, e.g. "PR Count", "Time to Merge")
        unit: "count", "seconds", "time", "percent", "loc", ...
        time_series: Entries in API order; dates are expected to be unique
    """

    label: str
    kind: str = ""
    unit: str = ""
    time_series: list[TimeSeriesEntry] = field(default_factory=list)

    @property
    def dates(self) -> list[str]:
        return [entry.date for entry in self.time_series]

    def has_data(self) -> bool:
        """
        Check whether at least one entry carries at least one point.

        A recorded 0 counts as data.
        """
        return any(entry.has_points for entry in self.time_series)

    def entry_for(self, date: str) -> TimeSeriesEntry | None:
        """
        Find the entry for a date.

        If the series repeats a date, the first occurrence is returned.
        """
        for entry in self.time_series:
            if entry.date == date:
                return entry
        return None

    def point_keys(self) -> list[str]:
        """Distinct point keys in first-seen order."""
        keys: list[str] = []
        for entry in self.time_series:
            for point in entry.points:
                if point.key not in keys:
                    keys.append(point.key)
        return keys

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "MetricSeries":
        raw_series = _pick(payload, "time_series", "timeSeries", default=[])
        return cls(
            label=str(_pick(payload, "label", default="")),
            kind=str(_pick(payload, "type", "kind", default="")),
            unit=str(_pick(payload, "unit", default="")),
            time_series=[TimeSeriesEntry.from_dict(entry) for entry in raw_series if isinstance(entry, dict)],
        )


@dataclass(frozen=True)
class SnapshotMetric:
    """
    Point-in-time metric compared against peers.

    Attributes:
        label: Metric label (matches the graph metric of the same name)
        description: Help text shown next to the chart
        value: Entity value
        peers_value: Peer group value
        unit: Unit of measurement
    """

    label: str
    description: str = ""
    value: float | None = None
    peers_value: float | None = None
    unit: str = ""
    icon_identifier: str = ""
    icon_color: str = ""

    def difference_from_peers(self) -> float | None:
        """Entity value minus peers value, or None if either is missing."""
        if self.value is None or self.peers_value is None:
            return None
        return self.value - self.peers_value

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "SnapshotMetric":
        return cls(
            label=str(_pick(payload, "label", default="")),
            description=str(_pick(payload, "description", default="")),
            value=_optional_number(_pick(payload, "value"), "value"),
            peers_value=_optional_number(_pick(payload, "peers_value", "peersValue"), "peers_value"),
            unit=str(_pick(payload, "unit", default="")),
            icon_identifier=str(_pick(payload, "icon_identifier", "iconIdentifier", default="")),
            icon_color=str(_pick(payload, "icon_color", "iconColor", default="")),
        )


def _optional_number(raw: Any, field_name: str) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        return log_and_return_default(
            logger, e, context={"field": field_name, "value": repr(raw)}, error_type="Snapshot value parsing"
        )


def _category_header(payload: dict[str, Any]) -> tuple[str, int]:
    category = payload.get("category") or {}
    if not isinstance(category, dict):
        return str(category), 0

    try:
        priority = int(category.get("priority", 0) or 0)
    except (TypeError, ValueError) as e:
        priority = log_and_return_default(
            logger, e, context={"category": category.get("name")}, default_value=0, error_type="Priority parsing"
        )
    return str(category.get("name", "")), priority


@dataclass
class GraphCategory:
    """Graph metrics grouped under one rule category (e.g. "Pull Requests")."""

    name: str
    priority: int = 0
    metrics: list[MetricSeries] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "GraphCategory":
        name, priority = _category_header(payload)
        metrics = [MetricSeries.from_dict(m) for m in payload.get("metrics") or [] if isinstance(m, dict)]
        return cls(name=name, priority=priority, metrics=metrics)


@dataclass
class SnapshotCategory:
    """Snapshot metrics grouped under one rule category."""

    name: str
    priority: int = 0
    metrics: list[SnapshotMetric] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "SnapshotCategory":
        name, priority = _category_header(payload)
        metrics = [SnapshotMetric.from_dict(m) for m in payload.get("metrics") or [] if isinstance(m, dict)]
        return cls(name=name, priority=priority, metrics=metrics)


@dataclass
class EntityMetricBundle:
    """
    All metrics for one member, team or organization.

    Attributes:
        entity_id: Member id, team id, or "organization"
        entity_name: Display name used for legends
        kind: Which kind of entity owns the bundle
        snapshot_categories: Point-in-time comparative metrics
        graph_categories: Time-series metrics

    Example:
        bundle = EntityMetricBundle.from_dict(team_payload, kind=EntityKind.TEAM)
        metric = bundle.find_graph_metric("PRs Merged")
    """

    entity_id: str
    entity_name: str
    kind: EntityKind
    snapshot_categories: list[SnapshotCategory] = field(default_factory=list)
    graph_categories: list[GraphCategory] = field(default_factory=list)

    def all_graph_metrics(self) -> list[MetricSeries]:
        return [metric for category in self.graph_categories for metric in category.metrics]

    def all_snapshot_metrics(self) -> list[SnapshotMetric]:
        return [metric for category in self.snapshot_categories for metric in category.metrics]

    def find_graph_metric(self, label: str) -> MetricSeries | None:
        """First graph metric with this label across all categories."""
        for metric in self.all_graph_metrics():
            if metric.label == label:
                return metric
        return None

    def find_snapshot_metric(self, label: str) -> SnapshotMetric | None:
        for metric in self.all_snapshot_metrics():
            if metric.label == label:
                return metric
        return None

    def describe(self, label: str) -> str:
        """Description of the snapshot metric sharing this label, or ''."""
        snapshot = self.find_snapshot_metric(label)
        return snapshot.description if snapshot else ""

    def fill_missing_units(self) -> None:
        """Copy the unit of same-label snapshot metrics onto graph metrics that carry none."""
        for metric in self.all_graph_metrics():
            if not metric.unit:
                snapshot = self.find_snapshot_metric(metric.label)
                if snapshot and snapshot.unit:
                    metric.unit = snapshot.unit

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        kind: EntityKind,
        entity_id: str | None = None,
        entity_name: str | None = None,
    ) -> "EntityMetricBundle":
        """
        Parse a member/team/organization metrics payload.

        Args:
            payload: Response body (snapshot_metrics / graph_metrics)
            kind: Owner kind
            entity_id: Overrides the id found in the payload (team_id / member_id / id)
            entity_name: Overrides the name found in the payload (team_name / name)
        """
        resolved_id = entity_id or str(_pick(payload, "team_id", "teamId", "member_id", "memberId", "id", default=""))
        resolved_name = entity_name or str(
            _pick(payload, "team_name", "teamName", "member_name", "memberName", "name", default=resolved_id)
        )
        if kind is EntityKind.ORGANIZATION and not resolved_id:
            resolved_id = "organization"
            resolved_name = resolved_name or "Organization"

        bundle = cls(
            entity_id=resolved_id,
            entity_name=resolved_name,
            kind=kind,
            snapshot_categories=[
                SnapshotCategory.from_dict(c)
                for c in _pick(payload, "snapshot_metrics", "snapshotMetrics", default=[])
                if isinstance(c, dict)
            ],
            graph_categories=[
                GraphCategory.from_dict(c)
                for c in _pick(payload, "graph_metrics", "graphMetrics", default=[])
                if isinstance(c, dict)
            ],
        )
        bundle.fill_missing_units()
        return bundle


@dataclass
class OrganizationMetrics:
    """
    Organization-level metrics with an optional per-team breakdown.

    Attributes:
        organization: Organization-level bundle
        teams_breakdown: Per-team copies of the same metric shape (may be empty)
    """

    organization: EntityMetricBundle
    teams_breakdown: list[EntityMetricBundle] = field(default_factory=list)

    @property
    def has_breakdown(self) -> bool:
        return len(self.teams_breakdown) > 0

    def all_bundles(self) -> list[EntityMetricBundle]:
        """Organization bundle followed by every team bundle."""
        return [self.organization, *self.teams_breakdown]

    def team_ids(self) -> list[str]:
        return [team.entity_id for team in self.teams_breakdown]

    @classmethod
    def from_dict(cls, payload: dict[str, Any], organization_name: str = "Organization") -> "OrganizationMetrics":
        organization = EntityMetricBundle.from_dict(
            payload,
            kind=EntityKind.ORGANIZATION,
            entity_id=str(_pick(payload, "organization_id", "organizationId", default="organization")),
            entity_name=str(_pick(payload, "organization_name", "organizationName", default=organization_name)),
        )
        teams = [
            EntityMetricBundle.from_dict(team, kind=EntityKind.TEAM)
            for team in _pick(payload, "teams_breakdown", "teamsBreakdown", default=[])
            if isinstance(team, dict)
        ]
        return cls(organization=organization, teams_breakdown=teams)


@dataclass(frozen=True)
class MetricsQuery:
    """
    Parameters a metric bundle was requested with.

    Attributes:
        start_date: YYYY-MM-DD (inclusive)
        end_date: YYYY-MM-DD (inclusive)
        interval: "daily", "weekly" or "monthly"

    Raises:
        ValueError: If a date is malformed, start is after end, or the interval is unknown
    """

    start_date: str
    end_date: str
    interval: str = "weekly"

    def __post_init__(self) -> None:
        start = parse_query_date(self.start_date)
        end = parse_query_date(self.end_date)
        if start > end:
            raise ValueError(f"start_date {self.start_date} is after end_date {self.end_date}")
        if self.interval not in VALID_INTERVALS:
            raise ValueError(f"interval must be one of {', '.join(VALID_INTERVALS)}: {self.interval!r}")

    def to_params(self) -> dict[str, str]:
        """Query-string parameters for the metrics endpoints."""
        return {"startDate": self.start_date, "endDate": self.end_date, "interval": self.interval}
