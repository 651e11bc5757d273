"""
Test Suite for Task Query.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Queries over loaded datasets
    - fixtures/: Shared YAML datasets and configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
