"""
Pytest configuration and shared fixtures

Provides common metric payloads, domain models and template schemas.
"""

import json

import pytest

from devinsights.domain.conversation import FieldType, TemplateField
from devinsights.domain.metrics import EntityKind, EntityMetricBundle, MetricSeries, OrganizationMetrics
from devinsights.secure_config import reset_config


def make_series(label: str, points_by_date: dict, kind: str = "PR Count", unit: str = "count") -> MetricSeries:
    """
    Build a MetricSeries from {date: value | [(key, value), ...] | None}.

    None produces an entry with no points.
    """
    time_series = []
    for date, value in points_by_date.items():
        if value is None:
            data = []
        elif isinstance(value, list):
            data = [{"key": key, "value": v} for key, v in value]
        else:
            data = [{"key": "value", "value": value}]
        time_series.append({"date": date, "data": data})
    return MetricSeries.from_dict({"label": label, "type": kind, "unit": unit, "time_series": time_series})


def graph_payload(label: str, points_by_date: dict, kind: str = "PR Count") -> dict:
    """Graph metric payload in wire (snake_case) format."""
    return {
        "label": label,
        "type": kind,
        "time_series": [
            {"date": date, "data": [] if value is None else [{"key": "prs", "value": value}]}
            for date, value in points_by_date.items()
        ],
    }


# ===== Payload Fixtures =====


@pytest.fixture
def series_factory():
    """Provide make_series for building MetricSeries inline"""
    return make_series


@pytest.fixture
def organization_payload():
    """Organization metrics response with a two-team breakdown"""
    return {
        "snapshot_metrics": [
            {
                "category": {"name": "Pull Requests", "priority": 1},
                "metrics": [
                    {
                        "label": "PRs Merged",
                        "description": "Pull requests merged in the period",
                        "value": 8,
                        "peers_value": 6,
                        "unit": "count",
                    },
                    {
                        "label": "Time to Merge",
                        "description": "Median time from open to merge",
                        "value": 7200,
                        "peers_value": 3600,
                        "unit": "seconds",
                    },
                ],
            }
        ],
        "graph_metrics": [
            {
                "category": {"name": "Pull Requests", "priority": 1},
                "metrics": [
                    graph_payload("PRs Merged", {"2024-01-01": 3, "2024-01-02": 5}),
                    graph_payload("Time to Merge", {"2024-01-01": 7200, "2024-01-02": None}, kind="Time to Merge"),
                    graph_payload("Reverts", {"2024-01-01": None, "2024-01-02": None}),
                ],
            }
        ],
        "teams_breakdown": [
            {
                "team_id": "t-a",
                "team_name": "Team A",
                "snapshot_metrics": [],
                "graph_metrics": [
                    {
                        "category": {"name": "Pull Requests", "priority": 1},
                        "metrics": [
                            graph_payload("PRs Merged", {"2024-01-01": 3}),
                            graph_payload("Time to Merge", {"2024-01-01": 7200}, kind="Time to Merge"),
                            graph_payload("Reverts", {"2024-01-01": None}),
                        ],
                    }
                ],
            },
            {
                "team_id": "t-b",
                "team_name": "Team B",
                "snapshot_metrics": [],
                "graph_metrics": [
                    {
                        "category": {"name": "Pull Requests", "priority": 1},
                        "metrics": [
                            graph_payload("PRs Merged", {"2024-01-02": 5}),
                            graph_payload("Time to Merge", {}, kind="Time to Merge"),
                            graph_payload("Reverts", {"2024-01-02": None}),
                        ],
                    }
                ],
            },
        ],
    }


@pytest.fixture
def organization_metrics(organization_payload):
    """Parsed OrganizationMetrics"""
    return OrganizationMetrics.from_dict(organization_payload)


@pytest.fixture
def team_bundle():
    """Team bundle with two charted metrics and one metric without data"""
    return EntityMetricBundle.from_dict(
        {
            "team_id": "t-a",
            "team_name": "Team A",
            "snapshot_metrics": [
                {
                    "category": {"name": "AI Usage", "priority": 2},
                    "metrics": [{"label": "Accept Rate", "description": "Accepted suggestions", "unit": "percent"}],
                }
            ],
            "graph_metrics": [
                {
                    "category": {"name": "Pull Requests", "priority": 1},
                    "metrics": [
                        graph_payload("PRs Merged", {"2024-01-01": 0}),
                        graph_payload("Reverts", {"2024-01-01": None}),
                    ],
                },
                {
                    "category": {"name": "AI Usage", "priority": 2},
                    "metrics": [graph_payload("Accept Rate", {"2024-01-01": 41.5}, kind="Rate")],
                },
            ],
        },
        kind=EntityKind.TEAM,
    )


# ===== Template Fixtures =====


@pytest.fixture
def template_fields():
    """One field of every type, mixed required flags, declared out of order"""
    return [
        TemplateField(id="notes", label="Notes", type=FieldType.TEXTAREA, required=False, order=3),
        TemplateField(id="topic", label="Topic", type=FieldType.TEXT, required=True, order=1),
        TemplateField(id="mood", label="Mood", type=FieldType.RATING, required=True, order=2),
        TemplateField(
            id="area", label="Area", type=FieldType.SELECT, required=False, order=4, options=("Career", "Project")
        ),
        TemplateField(id="followup", label="Follow-up", type=FieldType.CHECKBOX, required=False, order=5),
        TemplateField(id="due", label="Due Date", type=FieldType.DATE, required=False, order=6),
        TemplateField(id="hours", label="Hours", type=FieldType.NUMBER, required=False, order=7),
    ]


# ===== Environment Fixtures =====


@pytest.fixture
def clean_env(monkeypatch):
    """Remove dashboard environment variables and the cached config"""
    for name in ("DASHBOARD_DEFAULT_INTERVAL", "DASHBOARD_CHART_PALETTE", "LOG_LEVEL", "LOG_JSON", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("devinsights.secure_config.load_dotenv", lambda *args, **kwargs: False)
    reset_config()
    yield monkeypatch
    reset_config()


# ===== File System Fixtures =====


@pytest.fixture
def payload_file(tmp_path, organization_payload):
    """Organization metrics response written to disk"""
    path = tmp_path / "org_metrics.json"
    path.write_text(json.dumps(organization_payload, indent=2), encoding="utf-8")
    return path
