#!/usr/bin/env python3
"""
Generate organization chart datasets from a saved metrics response

Orchestrates the chart pipeline offline:
1. Load Data - MetricsDataLoader reads an organization metrics JSON response
2. Select - BreakdownSelection picks the organization or the requested teams
3. Build Charts - align, classify and suppress empty metrics
4. Save Output - chart datasets as JSON, optionally one CSV per chart

Usage:
    python -m devinsights.generate_chart_data org_metrics.json --breakdown --output .tmp/charts.json
"""

import argparse
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from devinsights.core.logging_config import setup_logging_from_config
from devinsights.dashboards.charts.aligner import aligned_rows_to_frame
from devinsights.dashboards.charts.breakdown import BreakdownSelection, build_breakdown_charts
from devinsights.dashboards.data_loader import MetricsDataLoader
from devinsights.secure_config import ConfigurationError, validate_config_on_startup
from devinsights.utils.formatting import slugify_series_key

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Build chart datasets from an organization metrics response")

    parser.add_argument("payload", type=str, help="Path to the organization metrics JSON response")

    parser.add_argument("--breakdown", action="store_true", help="Chart one line per team instead of the total")

    parser.add_argument(
        "--teams", nargs="*", default=None, help="Team ids to include with --breakdown (default: all teams)"
    )

    parser.add_argument(
        "--output", type=str, default=".tmp/charts.json", help="Path to output file (default: .tmp/charts.json)"
    )

    parser.add_argument("--csv-dir", type=str, default=None, help="Also write one CSV per chart to this directory")

    return parser.parse_args(argv)


def write_csv_exports(charts: list, csv_dir: Path) -> list[Path]:
    """Write each chart's aligned rows to <csv_dir>/<category>__<label>.csv."""
    csv_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for chart in charts:
        name = f"{slugify_series_key(chart.category) or 'uncategorized'}__{slugify_series_key(chart.label)}.csv"
        path = csv_dir / name
        aligned_rows_to_frame(chart.rows).to_csv(path)
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> int:
    """Chart generation pipeline. Returns the process exit code."""
    args = parse_arguments(argv)

    try:
        config = validate_config_on_startup()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging_from_config(config)

    # Stage 1: Load Data
    loader = MetricsDataLoader()
    metrics = loader.load_organization_metrics(args.payload)
    if metrics is None:
        logger.error(f"No usable metrics in {args.payload}")
        return 1

    # Stage 2: Select
    selection = BreakdownSelection()
    selection.set_breakdown(args.breakdown, metrics.team_ids())
    if args.breakdown and args.teams:
        selection.selected_ids = set(args.teams)

    # Stage 3: Build Charts
    charts = build_breakdown_charts(metrics, selection, palette=config.chart_palette)

    # Stage 4: Save Output
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    document = {
        "generated_at": datetime.now(UTC).isoformat(),
        "show_breakdown": selection.show_breakdown,
        "selected_team_ids": sorted(selection.selected_ids) if selection.show_breakdown else [],
        "charts": [chart.to_dict() for chart in charts],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
    logger.info(f"Wrote {len(charts)} charts to {output_path}")

    if args.csv_dir:
        written = write_csv_exports(charts, Path(args.csv_dir))
        logger.info(f"Wrote {len(written)} CSV exports to {args.csv_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
