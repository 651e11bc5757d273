"""
Error Types for the Task Query Engine.

All errors are raised synchronously to the immediate caller. Operations are
pure functions over in-memory data, so nothing here is retryable.

Hierarchy:
    - TaskQueryError: Base class for all engine errors
    - InvalidArgument: Malformed argument (negative limit, unknown category)
    - EmptySequence: Fold without identity over an empty sequence
    - LookupNotFound: No record exists for the requested identifier
    - AmbiguousComposition: A class did not resolve a capability conflict
"""

from __future__ import annotations

from typing import Optional, Sequence


class TaskQueryError(Exception):
    """Base class for task query errors."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidArgument(TaskQueryError, ValueError):
    """Raised when an operation receives a malformed argument."""


class EmptySequence(TaskQueryError, ValueError):
    """Raised when reducing an empty sequence without an identity element."""


class LookupNotFound(TaskQueryError, LookupError):
    """Raised (or carried) when no task exists for an identifier."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"No task found for id: {task_id}", field="id")
        self.task_id = task_id


class AmbiguousComposition(TaskQueryError, TypeError):
    """Raised at class creation when a default operation is inherited ambiguously."""

    def __init__(
        self,
        class_name: str,
        operation: str,
        candidates: Sequence[str],
    ) -> None:
        names = ", ".join(candidates)
        super().__init__(
            f"{class_name} inherits unrelated defaults for '{operation}' "
            f"from {names}; override '{operation}' explicitly",
            field=operation,
        )
        self.class_name = class_name
        self.operation = operation
        self.candidates = tuple(candidates)
