"""
Sample Task Dataset.

A fixed, deterministic dataset for development and testing: two reading
tasks, two coding tasks and one blogging task from September 2015.
"""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from task_query.domain.entities import Task, TaskBuilder, TaskType


class SampleTaskDataset:
    """Fixed task dataset for development and testing."""

    # (title, type, created_on, tags)
    SAMPLE_TASKS: List[Tuple[str, TaskType, date, Tuple[str, ...]]] = [
        (
            "Read Java 8 in action",
            TaskType.READING,
            date(2015, 9, 20),
            ("java", "java8", "books"),
        ),
        (
            "Write factorial program in Haskell",
            TaskType.CODING,
            date(2015, 9, 20),
            ("program", "haskell", "functional"),
        ),
        (
            "Read Effective Java",
            TaskType.READING,
            date(2015, 9, 21),
            ("java", "books"),
        ),
        (
            "Write a blog on Stream API",
            TaskType.BLOGGING,
            date(2015, 9, 21),
            ("writing", "stream", "java8"),
        ),
        (
            "Write prime number program in Scala",
            TaskType.CODING,
            date(2015, 9, 22),
            ("scala", "functional", "program"),
        ),
    ]

    def __init__(self) -> None:
        self._tasks = [self._build(*row) for row in self.SAMPLE_TASKS]

    def get_tasks(self) -> List[Task]:
        """Return the tasks in dataset order (a fresh list each call)."""
        return list(self._tasks)

    @staticmethod
    def _build(
        title: str,
        task_type: TaskType,
        created_on: date,
        tags: Tuple[str, ...],
    ) -> Task:
        builder = TaskBuilder(title, task_type, created_on=created_on)
        for tag in tags:
            builder.add_tag(tag)
        return builder.build()
