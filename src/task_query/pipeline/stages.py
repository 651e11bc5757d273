"""
Query Stage Implementations.

Each stage wraps one operation from task_query.pipeline.operations.
Arguments are validated when the stage is constructed, so a malformed
query fails while it is being built rather than when it runs.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List

from task_query.domain.entities import Task, TaskType
from task_query.domain.value_objects import SortDirection, SortSpec
from task_query.errors import InvalidArgument
from task_query.pipeline import operations


class CategoryFilterStage:
    """Keep tasks of one category."""

    def __init__(self, category: TaskType) -> None:
        if not isinstance(category, TaskType):
            raise InvalidArgument(
                f"category must be a TaskType, got {category!r}", field="category"
            )
        self.category = category

    @property
    def name(self) -> str:
        return f"filter_category[{self.category.value}]"

    def apply(self, items: Iterable[Task]) -> Iterable[Task]:
        return operations.filter_by_category(items, self.category)


class PredicateFilterStage:
    """Keep elements matching an arbitrary predicate."""

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self.predicate = predicate

    @property
    def name(self) -> str:
        return "filter"

    def apply(self, items: Iterable[Any]) -> Iterable[Any]:
        return operations.filter_by(items, self.predicate)


class SortStage:
    """Stable sort by one or more keys. Materializes its input."""

    def __init__(
        self,
        key: SortSpec,
        direction: SortDirection = SortDirection.ASCENDING,
    ) -> None:
        # Validate eagerly against an empty input
        operations.sort_by([], key, direction)
        self.key = key
        self.direction = direction

    @property
    def name(self) -> str:
        return "sort"

    def apply(self, items: Iterable[Any]) -> List[Any]:
        return operations.sort_by(items, self.key, self.direction)


class MapStage:
    """
    Project each element.

    With parallel=True the input is materialized first and the thread pool
    is used only if at least min_items elements arrived; smaller inputs are
    mapped on the calling thread.
    """

    def __init__(
        self,
        projection: Callable[[Any], Any],
        parallel: bool = False,
        max_workers: int = 4,
        min_items: int = 1,
    ) -> None:
        self.projection = projection
        self.parallel = parallel
        self.max_workers = max_workers
        self.min_items = min_items

    @property
    def name(self) -> str:
        return "map_parallel" if self.parallel else "map"

    def apply(self, items: Iterable[Any]) -> Iterable[Any]:
        if not self.parallel:
            return operations.map_values(items, self.projection)
        materialized = list(items)
        return operations.map_values(
            materialized,
            self.projection,
            parallel=len(materialized) >= self.min_items,
            max_workers=self.max_workers,
        )


class DistinctStage:
    """Drop repeated elements, first occurrence wins."""

    @property
    def name(self) -> str:
        return "distinct"

    def apply(self, items: Iterable[Any]) -> Iterable[Any]:
        return operations.distinct(items)


class LimitStage:
    """Keep the first n elements."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise InvalidArgument(f"limit must be >= 0, got {n}", field="n")
        self.n = n

    @property
    def name(self) -> str:
        return f"limit[{self.n}]"

    def apply(self, items: Iterable[Any]) -> Iterable[Any]:
        return operations.limit(items, self.n)


class FlatMapTagsStage:
    """Flatten task tags into one deduplicated stream of strings."""

    @property
    def name(self) -> str:
        return "flat_map_distinct_tags"

    def apply(self, items: Iterable[Task]) -> Iterable[str]:
        return operations.flat_map_distinct_tags(items)
