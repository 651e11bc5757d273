"""
Task Query - Declarative Query Pipeline over In-Memory Tasks.

Filters, sorts, projects, deduplicates, groups and folds a fixed,
already-loaded collection of tasks. Queries are chains of pure stages;
no stage mutates the source or another stage.

Main Components:
    - domain: Task record, TaskType, TaskBuilder, LookupResult
    - pipeline: Pure operations, stage objects and the TaskQuery chain
    - composition: Capability sets with default operations and
      composition-time conflict resolution
    - adapters: Sample/YAML datasets, task repository, metrics collector
    - config: Configuration models and loaders

Example:
    >>> from task_query import SampleTaskDataset, TaskQuery, TaskType
    >>> tasks = SampleTaskDataset().get_tasks()
    >>> (
    ...     TaskQuery(tasks)
    ...     .of_type(TaskType.READING)
    ...     .sorted_by(lambda t: len(t.title))
    ...     .map("title")
    ...     .to_list()
    ... )
    ['Read Effective Java', 'Read Java 8 in action']
"""

import logging

from task_query.adapters import (
    InMemoryMetricsCollector,
    InMemoryTaskRepository,
    SampleTaskDataset,
    YamlTaskLoader,
    load_tasks,
)
from task_query.config import QueryConfig, load_config
from task_query.domain import LookupResult, SortDirection, Task, TaskBuilder, TaskType, User
from task_query.errors import (
    AmbiguousComposition,
    EmptySequence,
    InvalidArgument,
    LookupNotFound,
    TaskQueryError,
)
from task_query.pipeline import TaskQuery

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Task Query.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import task_query
        >>> task_query.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("task_query").setLevel(level)


__all__ = [
    "configure_logging",
    "AmbiguousComposition",
    "EmptySequence",
    "InMemoryMetricsCollector",
    "InMemoryTaskRepository",
    "InvalidArgument",
    "LookupNotFound",
    "LookupResult",
    "QueryConfig",
    "SampleTaskDataset",
    "SortDirection",
    "Task",
    "TaskBuilder",
    "TaskQuery",
    "TaskQueryError",
    "TaskType",
    "User",
    "YamlTaskLoader",
    "load_config",
    "load_tasks",
]
