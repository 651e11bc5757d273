"""
Domain Layer - Core Entities and Value Objects.

This package contains the task record model and the small value types
that query operations exchange.

Entities:
    - Task: Immutable unit of work (equality on title + type)
    - TaskType: Closed enumeration of task categories
    - TaskBuilder: Construction-time tag collection
    - User: Optional assignee of a task

Value Objects:
    - SortDirection: Ascending or descending sort key
    - LookupResult: Found value or LookupNotFound error

Design Principles:
    - Immutable after construction (frozen pydantic models)
    - No infrastructure dependencies
"""

from task_query.domain.entities import Task, TaskBuilder, TaskType, User, build_task
from task_query.domain.value_objects import LookupResult, SortDirection

__all__ = [
    "Task",
    "TaskBuilder",
    "TaskType",
    "User",
    "build_task",
    "LookupResult",
    "SortDirection",
]
