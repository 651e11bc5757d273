"""
Adapters Package - Datasets, Repository and Metrics.

Adapters:
    - SampleTaskDataset: Fixed five-task dataset
    - YamlTaskLoader: Task dataset from YAML
    - InMemoryTaskRepository: Lookup by id with explicit results
    - InMemoryMetricsCollector: Query timings and result sizes
"""

from task_query.adapters.metrics_collector import InMemoryMetricsCollector, MetricEntry
from task_query.adapters.sample_dataset import SampleTaskDataset
from task_query.adapters.task_repository import InMemoryTaskRepository
from task_query.adapters.yaml_loader import YamlTaskLoader, load_tasks

__all__ = [
    "InMemoryMetricsCollector",
    "MetricEntry",
    "SampleTaskDataset",
    "InMemoryTaskRepository",
    "YamlTaskLoader",
    "load_tasks",
]
