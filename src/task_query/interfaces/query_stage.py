"""
Query Stage Protocol.

Defines the interface every query stage conforms to. A stage turns one
iterable into another without touching its input.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Stages are stateless; arguments are injected via constructor
    - apply() may return a lazy iterator; only stages that must see every
      element (sorting) materialize a list
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable


@runtime_checkable
class QueryStage(Protocol):
    """Abstract interface for query stages."""

    @property
    def name(self) -> str:
        """Name of this stage, used in logs and metrics."""
        ...

    def apply(self, items: Iterable[Any]) -> Iterable[Any]:
        """
        Transform items into the next stage's input.

        Args:
            items: Output of the previous stage

        Returns:
            Transformed items, possibly lazy
        """
        ...


@runtime_checkable
class MetricsCollector(Protocol):
    """Sink for query timing and size metrics."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Any = None
    ) -> None:
        ...

    def record_count(self, name: str, value: int, tags: Any = None) -> None:
        ...
