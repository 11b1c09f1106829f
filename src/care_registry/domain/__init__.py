"""
Domain Layer - Records, Criteria and Results.

This package contains the core domain model for the Care Registry.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Patient, Practitioner: Records held by a store
    - Gender: Enum of administrative genders
    - PatientCriteria, PractitionerCriteria: Sparse search criteria
    - DateRange, NumberRange: Range sub-criteria

Value Objects:
    - FilterResult: Result of a single filter stage
    - StageResult: Audit trail entry for a stage
    - SearchResult: Complete result of a search run

Design Principles:
    - Immutable (frozen models)
    - Absent criteria are None, never sentinel values
    - No infrastructure dependencies
"""

from care_registry.domain.entities import (
    DateRange,
    Gender,
    LookupRequest,
    NumberRange,
    Patient,
    PatientCriteria,
    Practitioner,
    PractitionerCriteria,
    Record,
    SearchCriteria,
)
from care_registry.domain.value_objects import FilterResult, SearchResult, StageResult

__all__ = [
    "DateRange",
    "Gender",
    "LookupRequest",
    "NumberRange",
    "Patient",
    "PatientCriteria",
    "Practitioner",
    "PractitionerCriteria",
    "Record",
    "SearchCriteria",
    "FilterResult",
    "SearchResult",
    "StageResult",
]
