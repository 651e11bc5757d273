"""
In-Memory Task Repository.

Looks tasks up by identifier. A miss is reported as a LookupResult
carrying LookupNotFound, never as None.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Iterable, List, Optional

from task_query.domain.entities import Task
from task_query.domain.value_objects import LookupResult
from task_query.pipeline.operations import index_by_id

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """Id-indexed view over a loaded task sequence."""

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}
        self._lock = RLock()

    def load(self, tasks: Iterable[Task]) -> None:
        """
        Replace the repository contents.

        Raises:
            InvalidArgument: If two tasks share an id
        """
        index = index_by_id(tasks)
        with self._lock:
            self._tasks = dict(index)
        logger.info(f"Loaded {len(index)} tasks into repository")

    def find(self, task_id: str) -> LookupResult[Task]:
        """Look a task up by id."""
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            logger.warning(f"Task not found: {task_id}")
            return LookupResult.not_found(task_id)
        return LookupResult.found(task)

    def get(self, task_id: str) -> Task:
        """
        Look a task up by id.

        Raises:
            LookupNotFound: If no task has this id
        """
        return self.find(task_id).unwrap()

    def task_assigned_to(self, task_id: str) -> Optional[str]:
        """
        Username of the task's assignee, or None for an unassigned task.

        Raises:
            LookupNotFound: If no task has this id
        """
        return (
            self.find(task_id)
            .map(lambda task: task.assigned_to.username if task.assigned_to else None)
            .unwrap()
        )

    def all(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks
