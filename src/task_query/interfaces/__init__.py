"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - QueryStage: One transformation step of a query chain
    - MetricsCollector: Timing and count metrics sink

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Small, focused interfaces
"""

from task_query.interfaces.query_stage import MetricsCollector, QueryStage

__all__ = ["MetricsCollector", "QueryStage"]
