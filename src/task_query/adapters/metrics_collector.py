"""
In-Memory Metrics Collector.

Keeps every timing and count a query terminal reports, so tests and
interactive sessions can inspect how queries behaved. Safe to share
between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MetricEntry:
    """One recorded measurement."""

    name: str
    kind: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    recorded_at: datetime = field(default_factory=datetime.now)


def _summarize(entries: List[MetricEntry]) -> Dict[str, Any]:
    values = [e.value for e in entries]
    return {
        "count": len(values),
        "total": sum(values),
        "min": min(values),
        "max": max(values),
        "last": values[-1],
    }


class InMemoryMetricsCollector:
    """Collects query metrics in memory."""

    def __init__(self) -> None:
        self._entries: Dict[str, List[MetricEntry]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(MetricEntry(name, "timing", duration_seconds, dict(tags or {})))

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(MetricEntry(name, "count", value, dict(tags or {})))

    def get_metrics(self) -> Dict[str, Dict[str, Any]]:
        """Per-name summary: count, total, min, max and last value."""
        with self._lock:
            return {name: _summarize(entries) for name, entries in self._entries.items()}

    def summary_by_tag(self, name: str, tag: str) -> Dict[str, Dict[str, Any]]:
        """
        Summarize one metric per value of a tag.

        Example:
            >>> collector.summary_by_tag("query_terminal_seconds", "terminal")
            {'to_list': {...}, 'count': {...}}

        Entries without the tag are left out.
        """
        groups: Dict[str, List[MetricEntry]] = {}
        for entry in self.get_entries(name):
            if tag in entry.tags:
                groups.setdefault(entry.tags[tag], []).append(entry)
        return {value: _summarize(entries) for value, entries in groups.items()}

    def get_entries(self, name: str) -> List[MetricEntry]:
        """Entries recorded under name, oldest first."""
        with self._lock:
            return list(self._entries.get(name, []))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _append(self, entry: MetricEntry) -> None:
        with self._lock:
            self._entries.setdefault(entry.name, []).append(entry)
