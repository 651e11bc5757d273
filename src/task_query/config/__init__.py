"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - QueryConfig: Root configuration object
    - QuerySettings: Join separator and default sort direction
    - ParallelConfig: Thresholds for order-preserving parallel map
    - DatasetConfig: Location of the YAML task dataset

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over a base file
"""

from task_query.config.loader import ConfigLoader, load_config
from task_query.config.models import (
    DatasetConfig,
    ParallelConfig,
    QueryConfig,
    QuerySettings,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "DatasetConfig",
    "ParallelConfig",
    "QueryConfig",
    "QuerySettings",
]
