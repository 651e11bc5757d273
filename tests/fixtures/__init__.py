"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample query configuration
    - sample_tasks.yaml: Three-task YAML dataset
"""
