"""
Validation Package - Criteria and Lookup Validation.

This package provides validation for:
    - CriteriaValidator: Validate search criteria before filtering

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
    - Configurable validation rules
"""

from care_registry.validation.criteria_validator import (
    CriteriaValidator,
    ValidationError,
)

__all__ = [
    "CriteriaValidator",
    "ValidationError",
]
