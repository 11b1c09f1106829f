"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with injected fixtures.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_criteria_validator.py: Criteria and lookup validation
    - test_text_filters.py: Substring, exact and phone stages
    - test_range_filters.py: Date and number range stages
    - test_record_store.py: Store construction and lookup
    - test_config_loader.py: Configuration loading/validation
    - test_metrics_collector.py: Metrics aggregation and audit events
    - test_tool_handlers.py: Tool result envelopes
"""
