"""
Test Suite for Care Registry.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end search and tool tests
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/care_registry          # With coverage
"""
