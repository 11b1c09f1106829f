"""
Filters Package - Concrete Filter Stage Implementations.

This package contains the filter stages folded over the record store
by the search pipeline. Each stage checks one criterion against one
record field and passes every record through when its criterion is
absent.

Filters:
    - SubstringFilter: Case-insensitive containment (name, email, ...)
    - ExactMatchFilter: Equality (date of birth, gender, experience)
    - PhoneFilter: Digits-only containment
    - DateRangeFilter: Inclusive calendar date range
    - NumberRangeFilter: Inclusive numeric range

Catalogs:
    - patient_stages: Stage list for patient searches
    - practitioner_stages: Stage list for practitioner searches

Design Principles:
    - Each stage is independently testable
    - Stateless filtering (criteria passed per call)
    - Clear rejection reasons for audit trail
"""

from care_registry.filters.base import RecordStage
from care_registry.filters.catalog import patient_stages, practitioner_stages
from care_registry.filters.ranges import DateRangeFilter, NumberRangeFilter
from care_registry.filters.text import (
    ExactMatchFilter,
    PhoneFilter,
    SubstringFilter,
    digits_only,
)

__all__ = [
    "RecordStage",
    "SubstringFilter",
    "ExactMatchFilter",
    "PhoneFilter",
    "DateRangeFilter",
    "NumberRangeFilter",
    "digits_only",
    "patient_stages",
    "practitioner_stages",
]
