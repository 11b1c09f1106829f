"""
Tools Package - Host Boundary Handlers.

Handlers turn raw tool arguments into pipeline calls and wrap the outcome
in a ToolResult envelope. Any exception raised below this layer becomes
a failure envelope here.

Tools:
    - get-patient, search-patient
    - search-practitioner, get-practitioner
"""

from care_registry.tools.patient_tools import (
    GET_PATIENT,
    SEARCH_PATIENT,
    get_patient,
    search_patients,
)
from care_registry.tools.practitioner_tools import (
    GET_PRACTITIONER,
    SEARCH_PRACTITIONER,
    get_practitioner,
    search_practitioners,
)
from care_registry.tools.results import ToolResult, ToolSpec, run_tool

__all__ = [
    "GET_PATIENT",
    "SEARCH_PATIENT",
    "GET_PRACTITIONER",
    "SEARCH_PRACTITIONER",
    "get_patient",
    "search_patients",
    "get_practitioner",
    "search_practitioners",
    "ToolResult",
    "ToolSpec",
    "run_tool",
]
