"""
Patient tools.

Handlers for patient lookup and search. Each takes the patient pipeline
and the raw tool arguments and returns a ToolResult.
"""

from __future__ import annotations

from typing import Any, Optional

from care_registry.domain.entities import Patient
from care_registry.pipeline.search_pipeline import SearchPipeline
from care_registry.tools.results import ToolResult, ToolSpec, run_tool

GET_PATIENT = ToolSpec(
    name="get-patient",
    title="Get Patient",
    description="Retrieve a single patient by id. Returns null when no patient has that id.",
)

SEARCH_PATIENT = ToolSpec(
    name="search-patient",
    title="Search Patients",
    description=(
        "Search patients by name, exact date of birth, date of birth range, "
        "gender, email, phone or address. Text fields match case-insensitive "
        "substrings; phone numbers match on digits only. All given criteria "
        "must match."
    ),
)


def get_patient(pipeline: SearchPipeline[Patient], args: Any) -> ToolResult:
    """Look up one patient: ``{"patient": {...} | null}``."""

    def handler() -> dict:
        patient: Optional[Patient] = pipeline.get_by_id(args)
        return {"patient": patient.to_payload() if patient else None}

    return run_tool(GET_PATIENT.name, handler, {"patient": None})


def search_patients(pipeline: SearchPipeline[Patient], args: Any) -> ToolResult:
    """Search patients: ``{"patients": [...]}``."""

    def handler() -> dict:
        patients = pipeline.search(args)
        return {"patients": [p.to_payload() for p in patients]}

    return run_tool(SEARCH_PATIENT.name, handler, {"patients": []})
