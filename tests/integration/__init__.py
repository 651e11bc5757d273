"""
Integration Tests - End-to-End Query Tests.

These tests run full queries over the sample dataset and YAML fixtures.

Test Files:
    - test_sample_dataset_queries.py: Queries, config, repository, metrics
"""
