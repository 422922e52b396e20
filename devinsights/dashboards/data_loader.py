"""
Data loading module for chart generation

Responsible for loading and validating saved metrics API responses
(organization metrics, conversation templates) from JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any

from devinsights.domain.conversation import ConversationTemplate
from devinsights.domain.metrics import OrganizationMetrics

logger = logging.getLogger(__name__)


class MetricsDataLoader:
    """Loads saved metrics responses from JSON files"""

    def __init__(self, data_dir: str | Path = "."):
        """
        Initialize data loader

        Args:
            data_dir: Directory relative file names are resolved against
        """
        self.data_dir = Path(data_dir)

    def _resolve(self, filename: str | Path) -> Path:
        path = Path(filename)
        return path if path.is_absolute() else self.data_dir / path

    def load_json_file(self, filename: str | Path) -> dict[str, Any] | None:
        """Load a JSON object file with error handling

        Args:
            filename: File name (relative to data_dir) or absolute path

        Returns:
            Parsed JSON object, or None if the file is missing, empty or invalid
        """
        file_path = self._resolve(filename)

        if not file_path.exists():
            logger.warning(f"{file_path}: File not found")
            return None

        file_size = file_path.stat().st_size
        if file_size == 0:
            logger.warning(f"{file_path}: File is empty")
            return None

        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"{file_path}: JSON decode error - {e}")
            return None
        except UnicodeDecodeError as e:
            logger.error(f"{file_path}: Unicode decode error - {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"{file_path}: Invalid data structure (not an object)")
            return None

        logger.info(f"{file_path}: Loaded successfully ({file_size:,} bytes)")
        return data

    def load_organization_metrics(self, filename: str | Path) -> OrganizationMetrics | None:
        """
        Load an organization metrics response.

        Returns:
            OrganizationMetrics, or None if the file could not be loaded or has no graph metrics key
        """
        data = self.load_json_file(filename)
        if data is None:
            return None

        if "graph_metrics" not in data and "graphMetrics" not in data:
            logger.warning(f"{filename}: Missing 'graph_metrics' key")
            return None

        metrics = OrganizationMetrics.from_dict(data)
        logger.info(
            f"Organization metrics: {len(metrics.organization.graph_categories)} graph categories, "
            f"{len(metrics.teams_breakdown)} teams in breakdown"
        )
        return metrics

    def load_conversation_template(self, filename: str | Path) -> ConversationTemplate | None:
        """
        Load a conversation template response.

        Accepts either the bare template object or {"conversation_template": {...}}.

        Returns:
            ConversationTemplate, or None if the file could not be loaded or is invalid
        """
        data = self.load_json_file(filename)
        if data is None:
            return None

        payload = data.get("conversation_template", data)
        try:
            return ConversationTemplate.from_dict(payload)
        except (KeyError, ValueError, TypeError) as e:
            logger.error(f"{filename}: Invalid conversation template - {e}")
            return None
