"""
Pipeline Package - Query Operations and Chains.

Components:
    - operations: Pure functions (filter, sort, map, distinct, limit,
      quantifiers, folds, grouping) over task sequences
    - stages: Stage objects wrapping the lazy operations
    - TaskQuery: Fluent, immutable chain of stages with terminal methods

Design Principles:
    - No stage mutates its input or another stage
    - Lazy evaluation; only sorting materializes intermediate storage
    - Malformed arguments fail while the query is built
"""

from task_query.pipeline.task_query import TaskQuery

__all__ = ["TaskQuery"]
