"""
Value Objects for Domain Layer.

Value objects describe query inputs and outcomes. They have no identity
of their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar, Union

from task_query.errors import LookupNotFound

T = TypeVar("T")


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Extracts a comparable key from an element
KeyFunction = Callable[[Any], Any]

# Binary combiner for folds: (accumulated, next) -> accumulated
Combiner = Callable[[T, T], T]


class SortDirection(str, Enum):
    """Direction of a sort key."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"

    @property
    def reverse(self) -> bool:
        return self is SortDirection.DESCENDING


# A single key, or (key, direction) pairs applied most-significant first
SortKey = Tuple[KeyFunction, SortDirection]
SortSpec = Union[KeyFunction, Sequence[SortKey]]


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Either a found value or the LookupNotFound error explaining its absence."""

    value: Optional[T] = None
    error: Optional[LookupNotFound] = None

    @classmethod
    def found(cls, value: T) -> "LookupResult[T]":
        return cls(value=value)

    @classmethod
    def not_found(cls, task_id: str) -> "LookupResult[T]":
        return cls(error=LookupNotFound(task_id))

    @property
    def is_found(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value or raise the carried error.

        Raises:
            LookupNotFound: If the lookup found nothing
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Return the value, or default when nothing was found."""
        return self.value if self.error is None else default  # type: ignore[return-value]

    def map(self, func: Callable[[T], Any]) -> "LookupResult[Any]":
        """Apply func to a found value; pass a not-found result through."""
        if self.error is not None:
            return LookupResult(error=self.error)
        return LookupResult.found(func(self.value))  # type: ignore[arg-type]
