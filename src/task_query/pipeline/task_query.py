"""
Task Query - Fluent, Lazy Query Chain.

A TaskQuery is an immutable description of a query over a fixed task
sequence: every builder method returns a new query with one more stage.
Nothing runs until a terminal method (to_list, count, all_match, ...) is
called, and then only the sort stage materializes intermediate storage.

Example:
    >>> titles = (
    ...     TaskQuery(tasks)
    ...     .of_type(TaskType.READING)
    ...     .sorted_by(title_length)
    ...     .map("title")
    ...     .to_list()
    ... )
"""

from __future__ import annotations

import logging
import time
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from task_query.config.models import QueryConfig
from task_query.domain.entities import TaskType
from task_query.domain.value_objects import SortDirection, SortSpec
from task_query.errors import EmptySequence
from task_query.interfaces.query_stage import MetricsCollector, QueryStage
from task_query.pipeline import operations
from task_query.pipeline.stages import (
    CategoryFilterStage,
    DistinctStage,
    FlatMapTagsStage,
    LimitStage,
    MapStage,
    PredicateFilterStage,
    SortStage,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")

KeyLike = Union[str, Callable[[Any], Any]]


def _as_key(key: KeyLike) -> Callable[[Any], Any]:
    if isinstance(key, str):
        return operations.key_of(key)
    return key


def _is_sort_pair(key: Any) -> bool:
    return (
        isinstance(key, tuple)
        and len(key) == 2
        and (isinstance(key[0], str) or callable(key[0]))
        and not isinstance(key[1], tuple)
    )


def _sort_spec(key: Any) -> Any:
    """Resolve attribute names; malformed specs are left for SortStage to reject."""
    if isinstance(key, str) or callable(key):
        return _as_key(key)
    if _is_sort_pair(key):
        key = [key]
    try:
        entries = list(key)
    except TypeError:
        return key
    return [
        (_as_key(entry[0]), entry[1])
        if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[0], str)
        else entry
        for entry in entries
    ]


def _first(items: Iterable[Any]) -> Any:
    for item in items:
        return item
    raise EmptySequence("query produced no elements")


class TaskQuery:
    """Immutable, lazily evaluated chain of query stages over a task sequence."""

    def __init__(
        self,
        source: Iterable[Any],
        stages: Sequence[QueryStage] = (),
        *,
        config: Optional[QueryConfig] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize a query.

        Args:
            source: Tasks to query; snapshotted, never modified
            stages: Stages applied in order
            config: Query defaults (join separator, sort direction, parallel map)
            metrics_collector: Optional sink for terminal timings
        """
        self._source: Tuple[Any, ...] = tuple(source)
        self._stages: Tuple[QueryStage, ...] = tuple(stages)
        self._config = config or QueryConfig()
        self._metrics_collector = metrics_collector

    def _add_stage(self, stage: QueryStage) -> "TaskQuery":
        return TaskQuery(
            self._source,
            self._stages + (stage,),
            config=self._config,
            metrics_collector=self._metrics_collector,
        )

    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self._stages]

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def of_type(self, category: TaskType) -> "TaskQuery":
        """Keep tasks of one category."""
        return self._add_stage(CategoryFilterStage(category))

    def where(self, predicate: Callable[[Any], bool]) -> "TaskQuery":
        """Keep elements matching predicate."""
        return self._add_stage(PredicateFilterStage(predicate))

    def sorted_by(
        self,
        key: Union[KeyLike, SortSpec],
        direction: Optional[SortDirection] = None,
    ) -> "TaskQuery":
        """
        Stable sort by an attribute name, a key function, one
        (key, direction) pair, or a list of pairs (most significant first).

        Raises:
            InvalidArgument: If a key or direction is malformed
        """
        direction = direction or self._config.query.default_direction
        return self._add_stage(SortStage(_sort_spec(key), direction))

    def map(self, projection: KeyLike) -> "TaskQuery":
        """
        Project each element.

        With parallel map enabled in the config, the projection runs on a
        thread pool whenever at least parallel.min_items elements reach it.
        """
        parallel = self._config.parallel
        return self._add_stage(
            MapStage(
                _as_key(projection),
                parallel=parallel.enabled,
                max_workers=parallel.max_workers,
                min_items=parallel.min_items,
            )
        )

    def distinct(self) -> "TaskQuery":
        return self._add_stage(DistinctStage())

    def limit(self, n: int) -> "TaskQuery":
        """Keep the first n elements. Raises InvalidArgument for n < 0."""
        return self._add_stage(LimitStage(n))

    def tags(self) -> "TaskQuery":
        """Switch to the deduplicated stream of tags of the current tasks."""
        return self._add_stage(FlatMapTagsStage())

    # -------------------------------------------------------------------------
    # Terminals
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        return iter(self._evaluate())

    def to_list(self) -> List[Any]:
        return self._terminal("to_list", lambda items: list(items))

    def count(self) -> int:
        return self._terminal("count", operations.count)

    def all_match(self, predicate: Callable[[Any], bool]) -> bool:
        return self._terminal(
            "all_match", lambda items: operations.all_match(items, predicate)
        )

    def any_match(self, predicate: Callable[[Any], bool]) -> bool:
        return self._terminal(
            "any_match", lambda items: operations.any_match(items, predicate)
        )

    def reduce(self, combiner: Callable[[Any, Any], Any]) -> Any:
        """Left fold from the first element. Raises EmptySequence on no input."""
        return self._terminal(
            "reduce", lambda items: operations.reduce_join(items, combiner)
        )

    def join(self, separator: Optional[str] = None) -> str:
        """Join string elements with the configured separator."""
        sep = self._config.query.join_separator if separator is None else separator
        return self._terminal(
            "join",
            lambda items: operations.reduce_join(
                items, lambda first, second: f"{first}{sep}{second}"
            ),
        )

    def group_by(self, key: KeyLike) -> Dict[Any, List[Any]]:
        key_fn = _as_key(key)
        return self._terminal(
            "group_by", lambda items: operations.group_by(items, key_fn)
        )

    def first(self) -> Any:
        """First element. Raises EmptySequence on no input."""
        return self._terminal("first", _first)

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def _evaluate(self) -> Iterable[Any]:
        items: Iterable[Any] = self._source
        for stage in self._stages:
            items = stage.apply(items)
        return items

    def _terminal(self, name: str, func: Callable[[Iterable[Any]], R]) -> R:
        start = time.perf_counter()
        result = func(self._evaluate())
        duration = time.perf_counter() - start

        logger.debug(
            f"Query {' -> '.join(self.stage_names) or '<source>'} -> {name} "
            f"over {len(self._source)} items ({duration:.6f}s)"
        )
        if self._metrics_collector is not None:
            self._metrics_collector.record_timing(
                "query_terminal_seconds", duration, {"terminal": name}
            )
            if isinstance(result, (list, dict)):
                self._metrics_collector.record_count(
                    "query_result_size", len(result), {"terminal": name}
                )
        return result
