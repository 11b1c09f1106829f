"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of a
filter stage or a complete search run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, Field

from care_registry.domain.entities import Record, SearchCriteria

RecordT = TypeVar("RecordT", bound=Record)

# Rejection reasons: record id -> reason string
RejectionReasonsDict = Dict[str, str]


class FilterResult(BaseModel):
    """Result of applying a single filter stage."""

    passed_ids: List[str] = Field(
        default_factory=list, description="Ids of records that passed"
    )
    rejected_ids: List[str] = Field(
        default_factory=list, description="Ids of records that were rejected"
    )
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Record id -> rejection reason"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_ids)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_ids)


class StageResult(BaseModel):
    """Result of a single filter stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    filtered_ids: List[str] = Field(
        default_factory=list, description="Ids of filtered records"
    )
    filter_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Record id -> rejection reason"
    )

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


@dataclass(frozen=True)
class SearchResult(Generic[RecordT]):
    """Complete result of a search run."""

    criteria: SearchCriteria
    records: List[RecordT]
    store_size: int
    audit_trail: List[StageResult] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def match_count(self) -> int:
        return len(self.records)

    @property
    def active_stages(self) -> List[str]:
        return [stage.stage_name for stage in self.audit_trail]
