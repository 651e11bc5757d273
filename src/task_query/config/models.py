"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from task_query.domain.value_objects import SortDirection


class QuerySettings(BaseModel):
    """Defaults applied by the fluent query chain."""

    join_separator: str = Field(default=" *** ")
    default_direction: SortDirection = Field(default=SortDirection.ASCENDING)


class ParallelConfig(BaseModel):
    """Configuration for order-preserving parallel map."""

    enabled: bool = False
    min_items: int = Field(default=1000, ge=1)
    max_workers: int = Field(default=4, ge=1, le=64)


class DatasetConfig(BaseModel):
    """Where the task dataset comes from."""

    path: Optional[str] = Field(
        default=None, description="YAML dataset path; sample dataset when unset"
    )


class QueryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    query: QuerySettings = Field(default_factory=QuerySettings)
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)
    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
