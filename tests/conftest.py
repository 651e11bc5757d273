"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List

import pytest

from task_query.adapters.metrics_collector import InMemoryMetricsCollector
from task_query.adapters.sample_dataset import SampleTaskDataset
from task_query.config.models import ParallelConfig, QueryConfig
from task_query.domain.entities import Task, TaskBuilder, TaskType


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to the sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def sample_tasks() -> List[Task]:
    """The five-task sample dataset."""
    return SampleTaskDataset().get_tasks()


@pytest.fixture
def default_config() -> QueryConfig:
    """Create default query configuration."""
    return QueryConfig()


@pytest.fixture
def parallel_config() -> QueryConfig:
    """Configuration forcing parallel map for any input size."""
    return QueryConfig(parallel=ParallelConfig(enabled=True, min_items=1, max_workers=4))


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def sample_task() -> Task:
    """A single reading task with tags."""
    return (
        TaskBuilder("Read Effective Java", TaskType.READING, created_on=date(2015, 9, 21))
        .add_tag("java")
        .add_tag("books")
        .build()
    )


@pytest.fixture
def duplicated_tasks() -> List[Task]:
    """Tasks where two pairs share title and type but nothing else."""
    return [
        TaskBuilder("Read Effective Java", TaskType.READING, id="a").add_tag("java").build(),
        TaskBuilder("Write a blog", TaskType.BLOGGING, id="b").build(),
        TaskBuilder(
            "Read Effective Java",
            TaskType.READING,
            id="c",
            description="second copy",
        ).build(),
        TaskBuilder("Read Effective Java", TaskType.CODING, id="d").build(),
        TaskBuilder("Write a blog", TaskType.BLOGGING, id="e").add_tag("writing").build(),
    ]
