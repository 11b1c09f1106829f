"""
Practitioner tools.
"""

from __future__ import annotations

from typing import Any

from care_registry.domain.entities import Practitioner
from care_registry.pipeline.search_pipeline import SearchPipeline
from care_registry.tools.results import ToolResult, ToolSpec, run_tool

SEARCH_PRACTITIONER = ToolSpec(
    name="search-practitioner",
    title="Search Practitioners",
    description=(
        "Search practitioners by name, specialty, email, phone, license number, "
        "exact years of experience or a years-of-experience range. Text fields "
        "match case-insensitive substrings; ranges are inclusive."
    ),
)

GET_PRACTITIONER = ToolSpec(
    name="get-practitioner",
    title="Get Practitioner",
    description="Retrieve a single practitioner by id. Returns null when none matches.",
)


def search_practitioners(pipeline: SearchPipeline[Practitioner], args: Any) -> ToolResult:
    """Search practitioners: ``{"practitioners": [...]}``."""

    def handler() -> dict:
        practitioners = pipeline.search(args)
        return {"practitioners": [p.to_payload() for p in practitioners]}

    return run_tool(SEARCH_PRACTITIONER.name, handler, {"practitioners": []})


def get_practitioner(pipeline: SearchPipeline[Practitioner], args: Any) -> ToolResult:
    """Look up one practitioner: ``{"practitioner": {...} | null}``."""

    def handler() -> dict:
        practitioner = pipeline.get_by_id(args)
        return {"practitioner": practitioner.to_payload() if practitioner else None}

    return run_tool(GET_PRACTITIONER.name, handler, {"practitioner": None})
