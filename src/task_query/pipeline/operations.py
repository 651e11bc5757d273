"""
Query Operations - Pure Functions over Task Sequences.

Every operation takes an iterable and leaves it untouched. Filtering,
mapping, deduplication, limiting and tag flattening are lazy generators;
sorting materializes a new list because it has to see every element.

Ordering guarantees:
    - filter/map/distinct/limit keep input order
    - sort_by is stable, also for descending keys
    - group_by keeps member order within each group
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TypeVar,
)

from task_query.domain.entities import Task, TaskType
from task_query.domain.value_objects import SortDirection, SortKey, SortSpec
from task_query.errors import EmptySequence, InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")

DEFAULT_JOIN_SEPARATOR = " *** "


def filter_by(seq: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Lazily keep the elements matching predicate."""
    return (item for item in seq if predicate(item))


def filter_by_category(seq: Iterable[Task], category: TaskType) -> Iterator[Task]:
    """
    Lazily keep tasks of one category, in original order.

    Raises:
        InvalidArgument: If category is not a TaskType
    """
    if not isinstance(category, TaskType):
        raise InvalidArgument(
            f"category must be a TaskType, got {category!r}", field="category"
        )
    return (task for task in seq if task.type is category)


def as_direction(direction: Any) -> SortDirection:
    """
    Coerce a SortDirection or its name.

    Raises:
        InvalidArgument: If direction names no SortDirection
    """
    try:
        return SortDirection(direction)
    except ValueError:
        raise InvalidArgument(
            f"unknown sort direction: {direction!r}", field="direction"
        ) from None


def _normalize_sort_spec(key: SortSpec, direction: SortDirection) -> List[SortKey]:
    if callable(key):
        return [(key, as_direction(direction))]
    if isinstance(key, (str, bytes)):
        raise InvalidArgument(f"sort key must be callable, got {key!r}", field="key")
    try:
        keys = list(key)
    except TypeError:
        raise InvalidArgument(f"sort key must be callable, got {key!r}", field="key") from None
    if not keys:
        raise InvalidArgument("sort_by needs at least one key", field="key")
    normalized: List[SortKey] = []
    for entry in keys:
        if not (isinstance(entry, tuple) and len(entry) == 2 and callable(entry[0])):
            raise InvalidArgument(
                f"sort keys must be (callable, SortDirection) pairs, got {entry!r}",
                field="key",
            )
        normalized.append((entry[0], as_direction(entry[1])))
    return normalized


def sort_by(
    seq: Iterable[T],
    key: SortSpec,
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[T]:
    """
    Return a new list sorted by one or more keys.

    Args:
        seq: Elements to sort (not modified)
        key: A key function, or (key, direction) pairs, most significant first
        direction: Direction used when key is a single function

    Returns:
        Sorted list; elements with equal keys keep their input order

    Raises:
        InvalidArgument: If the key specification is malformed
    """
    keys = _normalize_sort_spec(key, direction)
    result = list(seq)
    # Stable passes from least to most significant key
    for key_fn, key_direction in reversed(keys):
        result.sort(key=key_fn, reverse=key_direction.reverse)
    return result


def map_values(
    seq: Iterable[T],
    projection: Callable[[T], U],
    *,
    parallel: bool = False,
    max_workers: int = 4,
) -> Iterator[U]:
    """
    Project each element, keeping length and order.

    With parallel=True the projection runs on a thread pool; results are
    still yielded in input order.
    """
    if not parallel:
        return (projection(item) for item in seq)

    items = list(seq)
    logger.debug(f"Parallel map over {len(items)} items ({max_workers} workers)")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(projection, items))
    return iter(results)


def distinct(seq: Iterable[T]) -> Iterator[T]:
    """Lazily drop elements equal to an earlier one; first occurrence wins."""
    seen: Set[Any] = set()
    for item in seq:
        if item in seen:
            continue
        seen.add(item)
        yield item


def limit(seq: Iterable[T], n: int) -> Iterator[T]:
    """
    Lazily take the first n elements.

    Raises:
        InvalidArgument: If n is negative
    """
    if n < 0:
        raise InvalidArgument(f"limit must be >= 0, got {n}", field="n")
    return _take(seq, n)


def _take(seq: Iterable[T], n: int) -> Iterator[T]:
    if n == 0:
        return
    for index, item in enumerate(seq, start=1):
        yield item
        if index >= n:
            return


def flat_map_distinct_tags(seq: Iterable[Task]) -> Iterator[str]:
    """
    Lazily flatten every task's tags and drop repeated tags.

    Tasks are visited in input order; tags within a task in sorted order.
    """
    return distinct(tag for task in seq for tag in sorted(task.tags))


def count(seq: Iterable[Any]) -> int:
    """Number of elements in the sequence."""
    return sum(1 for _ in seq)


def all_match(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """True if every element matches (vacuously true for empty input)."""
    return all(predicate(item) for item in seq)


def any_match(seq: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """True if at least one element matches (false for empty input)."""
    return any(predicate(item) for item in seq)


def reduce_join(seq: Iterable[T], combiner: Callable[[T, T], T]) -> T:
    """
    Left-fold the sequence, starting from its first element.

    Raises:
        EmptySequence: If the sequence has no elements
    """
    iterator = iter(seq)
    try:
        accumulated = next(iterator)
    except StopIteration:
        raise EmptySequence("cannot reduce an empty sequence without an identity") from None
    for item in iterator:
        accumulated = combiner(accumulated, item)
    return accumulated


def join_titles(seq: Iterable[Task], separator: str = DEFAULT_JOIN_SEPARATOR) -> str:
    """
    Join task titles in order with separator.

    Raises:
        EmptySequence: If there are no tasks
    """
    return reduce_join(
        (task.title for task in seq),
        lambda first, second: f"{first}{separator}{second}",
    )


def group_by(seq: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """Group elements by key; each group keeps input order."""
    groups: Dict[K, List[T]] = {}
    for item in seq:
        groups.setdefault(key(item), []).append(item)
    return groups


def index_by_id(
    seq: Iterable[Task],
    merge: Optional[Callable[[Task, Task], Task]] = None,
) -> "OrderedDict[str, Task]":
    """
    Map task id to task, in first-seen order.

    Args:
        seq: Tasks to index
        merge: Resolves two tasks sharing an id as merge(existing, incoming)

    Raises:
        InvalidArgument: On a duplicate id when no merge function is given
    """
    index: "OrderedDict[str, Task]" = OrderedDict()
    for task in seq:
        existing = index.get(task.id)
        if existing is None:
            index[task.id] = task
        elif merge is None:
            raise InvalidArgument(f"duplicate task id: {task.id}", field="id")
        else:
            index[task.id] = merge(existing, task)
    return index


def key_of(name: str) -> Callable[[Any], Hashable]:
    """Key function reading an attribute by name."""
    def _key(item: Any) -> Hashable:
        return getattr(item, name)

    _key.__name__ = f"key_of_{name}"
    return _key


def title_length(task: Task) -> int:
    return len(task.title)
