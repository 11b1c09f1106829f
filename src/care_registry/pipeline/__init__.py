"""
Pipeline Package - Search Orchestration.

This package contains the orchestration logic for searching a record
store and the factories that wire it together.

Components:
    - SearchPipeline: Validates criteria and folds stages over the store
    - create_patient_pipeline / create_practitioner_pipeline: Factories

The pipeline is responsible for:
    - Validating search criteria
    - Executing active filter stages in sequence
    - Lookup by id
    - Collecting metrics and audit trail
    - Generating the final SearchResult

Design Principles:
    - All dependencies injected via constructor
    - Stateless operation over an immutable store
    - Clear separation of concerns
"""

from care_registry.pipeline.factory import (
    create_patient_pipeline,
    create_practitioner_pipeline,
)
from care_registry.pipeline.search_pipeline import SearchPipeline

__all__ = [
    "SearchPipeline",
    "create_patient_pipeline",
    "create_practitioner_pipeline",
]
