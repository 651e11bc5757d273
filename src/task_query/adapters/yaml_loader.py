"""
YAML Task Loader.

Reads a task dataset from YAML. The file holds either a list of tasks or
a mapping with a top-level `tasks` list:

    tasks:
      - title: Read Effective Java
        type: READING
        created_on: 2015-09-21
        tags: [java, books]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from task_query.adapters.sample_dataset import SampleTaskDataset
from task_query.config.models import QueryConfig
from task_query.domain.entities import Task, build_task
from task_query.errors import InvalidArgument

logger = logging.getLogger(__name__)


class YamlTaskLoader:
    """Loads and validates tasks from YAML files."""

    def load(self, path: Union[str, Path]) -> List[Task]:
        """
        Load tasks from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidArgument: If the document or any task is malformed
        """
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        tasks = self.load_from_data(document)
        logger.info(f"Loaded {len(tasks)} tasks from {path}")
        return tasks

    def load_from_data(self, document: Any) -> List[Task]:
        """Validate an already-parsed YAML document into tasks."""
        if document is None:
            return []
        if isinstance(document, dict):
            document = document.get("tasks", [])
        if not isinstance(document, list):
            raise InvalidArgument(
                f"expected a list of tasks, got {type(document).__name__}",
                field="tasks",
            )
        return [self._to_task(index, entry) for index, entry in enumerate(document)]

    def _to_task(self, index: int, entry: Any) -> Task:
        if not isinstance(entry, dict):
            raise InvalidArgument(
                f"task #{index} must be a mapping, got {type(entry).__name__}",
                field=f"tasks[{index}]",
            )
        fields: Dict[str, Any] = dict(entry)
        if fields.get("tags", ()) is None:
            del fields["tags"]
        elif not isinstance(fields.get("tags", ()), (list, tuple)):
            raise InvalidArgument(
                f"task #{index} tags must be a list, got {type(fields['tags']).__name__}",
                field=f"tasks[{index}].tags",
            )
        try:
            return build_task(**fields)
        except InvalidArgument as e:
            logger.error(f"Invalid task #{index}: {e.message}")
            raise


def load_tasks(config: QueryConfig) -> List[Task]:
    """
    Load the dataset named by config.dataset.path, or the sample dataset.

    Raises:
        FileNotFoundError: If the configured file doesn't exist
        InvalidArgument: If the file holds malformed tasks
    """
    if config.dataset.path:
        return YamlTaskLoader().load(config.dataset.path)
    return SampleTaskDataset().get_tasks()
