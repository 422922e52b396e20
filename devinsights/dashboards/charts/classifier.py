"""Chart type classification

Decides how a metric is drawn from its declared kind and unit:
- bar chart for counts and totals, line chart otherwise
- duration formatting for second-based units
"""

from dataclasses import dataclass

from devinsights.domain.constants import chart_constants
from devinsights.domain.metrics import MetricSeries
from devinsights.utils.formatting import format_metric_value

BAR = "bar"
LINE = "line"


@dataclass(frozen=True)
class ChartPresentation:
    """
    How a chart should be rendered.

    Attributes:
        shape: "bar" or "line"
        is_duration: True when values are seconds and should be shown as durations
    """

    shape: str
    is_duration: bool

    def to_dict(self) -> dict:
        return {"shape": self.shape, "is_duration": self.is_duration}


def classify(metric: MetricSeries) -> ChartPresentation:
    """
    Classify a metric's presentation.

    Args:
        metric: Reference metric (kind and unit are read; missing values are fine)

    Returns:
        ChartPresentation

    Examples:
        >>> classify(MetricSeries(label="PRs", kind="PR Count", unit="count"))
        ChartPresentation(shape='bar', is_duration=False)
        >>> classify(MetricSeries(label="TTM", kind="Time to Merge", unit="seconds"))
        ChartPresentation(shape='line', is_duration=True)
    """
    kind = (metric.kind or "").lower()
    is_bar = any(keyword in kind for keyword in chart_constants.BAR_KIND_KEYWORDS)
    is_duration = (metric.unit or "") in chart_constants.DURATION_UNITS

    return ChartPresentation(shape=BAR if is_bar else LINE, is_duration=is_duration)


def format_axis_value(metric: MetricSeries, value: float | None) -> str:
    """Format a chart value (tooltip / axis tick) using the metric's unit."""
    return format_metric_value(value, metric.unit)
