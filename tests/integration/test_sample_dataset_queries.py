"""
Integration Tests for Queries over Loaded Datasets.

Tests cover:
    - End-to-end queries over the sample dataset
    - Config-driven dataset loading and join separator
    - Repository lookups feeding queries
    - Metrics and debug logging of terminals
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List

import pytest

from task_query import (
    InMemoryMetricsCollector,
    InMemoryTaskRepository,
    SortDirection,
    Task,
    TaskQuery,
    TaskType,
    load_config,
    load_tasks,
)
from task_query.config.models import DatasetConfig, QueryConfig


@pytest.fixture
def query(sample_tasks: List[Task]) -> TaskQuery:
    return TaskQuery(sample_tasks)


class TestSampleDatasetQueries:
    """Queries over the five-task sample dataset."""

    def test_reading_titles_by_length(self, query: TaskQuery) -> None:
        """
        SCENARIO: Reading tasks sorted by title length, projected to titles
        EXPECTED: Shorter title first
        """
        # Act
        titles = (
            query.of_type(TaskType.READING)
            .sorted_by(lambda t: len(t.title))
            .map("title")
            .to_list()
        )

        # Assert
        assert titles == ["Read Effective Java", "Read Java 8 in action"]

    def test_latest_reading_task(self, query: TaskQuery) -> None:
        latest = (
            query.of_type(TaskType.READING)
            .sorted_by("created_on", SortDirection.DESCENDING)
            .limit(1)
            .map("title")
            .first()
        )

        assert latest == "Read Effective Java"

    def test_reading_tasks_are_all_books(self, query: TaskQuery) -> None:
        reading = query.of_type(TaskType.READING)

        assert reading.all_match(lambda t: t.has_tag("books"))
        assert reading.any_match(lambda t: t.has_tag("java8"))
        assert not reading.any_match(lambda t: t.has_tag("scala"))

    def test_join_all_titles(self, query: TaskQuery) -> None:
        joined = query.map("title").join()

        assert joined == (
            "Read Java 8 in action *** Write factorial program in Haskell *** "
            "Read Effective Java *** Write a blog on Stream API *** "
            "Write prime number program in Scala"
        )

    def test_distinct_tags(self, query: TaskQuery) -> None:
        """
        SCENARIO: Tags of every task, deduplicated
        EXPECTED: First occurrence order, tags sorted within each task
        """
        tags = query.tags().to_list()

        assert tags == [
            "books",
            "java",
            "java8",
            "functional",
            "haskell",
            "program",
            "stream",
            "writing",
            "scala",
        ]
        assert query.tags().count() == 9

    def test_group_by_type(self, query: TaskQuery) -> None:
        groups = query.group_by("type")

        assert list(groups) == [TaskType.READING, TaskType.CODING, TaskType.BLOGGING]
        assert [len(g) for g in groups.values()] == [2, 2, 1]

    def test_group_titles_by_day(self, query: TaskQuery) -> None:
        groups = query.sorted_by("created_on").group_by("created_on")

        assert [len(g) for g in groups.values()] == [2, 2, 1]
        assert groups[date(2015, 9, 22)][0].title == "Write prime number program in Scala"

    def test_source_untouched(self, sample_tasks: List[Task]) -> None:
        before = [t.id for t in sample_tasks]

        TaskQuery(sample_tasks).sorted_by("title", SortDirection.DESCENDING).to_list()

        assert [t.id for t in sample_tasks] == before


class TestConfiguredQueries:
    """Queries driven by a loaded configuration."""

    def test_yaml_dataset_with_configured_separator(
        self, sample_config_path: Path, fixtures_path: Path
    ) -> None:
        """
        SCENARIO: Config names a YAML dataset and a custom join separator
        EXPECTED: Tasks come from the file, titles joined with " | "
        """
        # Arrange
        config = load_config(sample_config_path)
        config = config.model_copy(
            update={"dataset": DatasetConfig(path=str(fixtures_path / "sample_tasks.yaml"))}
        )
        tasks = load_tasks(config)

        # Act
        joined = (
            TaskQuery(tasks, config=config)
            .of_type(TaskType.READING)
            .map("title")
            .join()
        )

        # Assert
        assert joined == "Read Java 8 in action | Read Effective Java"

    def test_parallel_map_matches_sequential(
        self, sample_tasks: List[Task], parallel_config: QueryConfig
    ) -> None:
        parallel = TaskQuery(sample_tasks, config=parallel_config).map("title")
        sequential = TaskQuery(sample_tasks).map("title")

        assert parallel.stage_names == ["map_parallel"]
        assert parallel.to_list() == sequential.to_list()


class TestRepositoryQueries:
    """Repository lookups combined with queries."""

    def test_lookup_ids_from_query(self, sample_tasks: List[Task]) -> None:
        repository = InMemoryTaskRepository()
        repository.load(sample_tasks)

        ids = TaskQuery(repository.all()).of_type(TaskType.CODING).map("id").to_list()

        assert [repository.get(i).type for i in ids] == [TaskType.CODING, TaskType.CODING]
        assert not repository.find("no-such-id").is_found


class TestTerminalObservability:
    """Metrics and logging emitted by terminals."""

    def test_metrics_recorded(
        self, sample_tasks: List[Task], metrics_collector: InMemoryMetricsCollector
    ) -> None:
        query = TaskQuery(sample_tasks, metrics_collector=metrics_collector)

        query.of_type(TaskType.READING).to_list()
        query.count()

        per_terminal = metrics_collector.summary_by_tag("query_terminal_seconds", "terminal")
        sizes = metrics_collector.get_entries("query_result_size")
        assert sorted(per_terminal) == ["count", "to_list"]
        assert per_terminal["count"]["count"] == 1
        assert [e.value for e in sizes] == [2]

    def test_debug_log_names_stages(
        self, sample_tasks: List[Task], caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="task_query")

        TaskQuery(sample_tasks).of_type(TaskType.CODING).limit(1).to_list()

        assert "filter_category[CODING] -> limit[1] -> to_list" in caplog.text
