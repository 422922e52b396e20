"""
Engineering Productivity Dashboard - Metrics Core

This package contains the chart aggregation, navigation and form validation
logic behind the engineering productivity dashboard.

Package Structure:
    - core: Infrastructure (config, logging)
    - domain: Domain models (MetricSeries, EntityMetricBundle, TemplateField)
    - dashboards: Chart alignment, breakdown selection, carousels, session state
    - conversations: Conversation template answer validation
    - utils: Date parsing, value formatting, error handling helpers
"""

__version__ = "1.0.0"
__author__ = "Engineering Metrics Team"
