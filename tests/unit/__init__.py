"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_task_entity.py: Task record, builder, equality
    - test_operations.py: Pure pipeline operations
    - test_task_query.py: TaskQuery chaining and terminals
    - test_capability.py: Default resolution for capability sets
    - test_calculator.py: Calculator capability
    - test_task_repository.py: Lookup by id
    - test_metrics_collector.py: Metric summaries
    - test_yaml_loader.py: YAML datasets
    - test_config_loader.py: Configuration loading/validation
"""
