"""
Record Stage Base Class.

A stage checks one search criterion against one record field. The
pipeline folds the stages over the record list; a stage whose criterion
is absent passes every record through unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from care_registry.domain.entities import Record, SearchCriteria
from care_registry.domain.value_objects import FilterResult


class RecordStage(ABC):
    """Filter records by a single criterion."""

    def __init__(self, criterion: str, field: Optional[str] = None) -> None:
        """
        Initialize stage.

        Args:
            criterion: Attribute name on the criteria model
            field: Attribute name on the record (defaults to criterion)
        """
        self.criterion = criterion
        self.field = field or criterion

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return f"{self.criterion}_filter"

    def criterion_value(self, criteria: SearchCriteria) -> Any:
        return getattr(criteria, self.criterion, None)

    def is_active(self, criteria: SearchCriteria) -> bool:
        """True when the criterion constrains this run."""
        return self.criterion_value(criteria) is not None

    def apply(
        self,
        records: Sequence[Record],
        criteria: SearchCriteria,
    ) -> FilterResult:
        """
        Apply the stage to records.

        Args:
            records: Records to filter, in store order
            criteria: Validated criteria

        Returns:
            FilterResult with passed/rejected ids in input order
        """
        if not self.is_active(criteria):
            return FilterResult(passed_ids=[r.id for r in records])

        expected = self._prepare(self.criterion_value(criteria))

        passed: List[str] = []
        rejected: List[str] = []
        reasons: Dict[str, str] = {}

        for record in records:
            is_match, reason = self._check(getattr(record, self.field, None), expected)
            if is_match:
                passed.append(record.id)
            else:
                rejected.append(record.id)
                reasons[record.id] = reason

        return FilterResult(
            passed_ids=passed,
            rejected_ids=rejected,
            rejection_reasons=reasons,
        )

    def matches(self, record: Record, criteria: SearchCriteria) -> bool:
        """Check a single record against the criteria."""
        if not self.is_active(criteria):
            return True
        expected = self._prepare(self.criterion_value(criteria))
        is_match, _ = self._check(getattr(record, self.field, None), expected)
        return is_match

    def _prepare(self, value: Any) -> Any:
        """Normalize the criterion once per run."""
        return value

    @abstractmethod
    def _check(self, actual: Any, expected: Any) -> Tuple[bool, str]:
        """Check one record value against the prepared criterion."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.criterion!r})"
