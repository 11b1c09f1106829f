"""
Range Filter Stages.

Inclusive range checks over a record field:
    - DateRangeFilter: calendar dates parsed from ISO strings
    - NumberRangeFilter: numeric fields

A range with neither bound set imposes no constraint. Records lacking
the field never match an active range.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from care_registry.domain.dates import parse_calendar_date
from care_registry.domain.entities import DateRange, NumberRange, SearchCriteria
from care_registry.filters.base import RecordStage

DateBounds = Tuple[Optional[date], Optional[date]]
NumberBounds = Tuple[Optional[float], Optional[float]]


class DateRangeFilter(RecordStage):
    """
    Filter records whose date field falls within [start, end].

    Bounds that fail to parse are treated as absent (open-ended); strict
    rejection of such bounds is the validator's job. A record date that
    fails to parse never matches.
    """

    def is_active(self, criteria: SearchCriteria) -> bool:
        value: Optional[DateRange] = self.criterion_value(criteria)
        return value is not None and value.is_bounded

    def _prepare(self, value: DateRange) -> DateBounds:
        return parse_calendar_date(value.start), parse_calendar_date(value.end)

    def _check(self, actual: Optional[str], expected: DateBounds) -> Tuple[bool, str]:
        start, end = expected
        if start is None and end is None:
            return True, ""
        if actual is None:
            return False, f"{self.field} missing"

        record_date = parse_calendar_date(actual)
        if record_date is None:
            return False, f"{self.field}={actual!r} is not a valid date"
        if start is not None and record_date < start:
            return False, f"{self.field}={record_date} before {start}"
        if end is not None and record_date > end:
            return False, f"{self.field}={record_date} after {end}"
        return True, ""


class NumberRangeFilter(RecordStage):
    """Filter records whose numeric field falls within [min, max]."""

    def is_active(self, criteria: SearchCriteria) -> bool:
        value: Optional[NumberRange] = self.criterion_value(criteria)
        return value is not None and value.is_bounded

    def _prepare(self, value: NumberRange) -> NumberBounds:
        return value.min, value.max

    def _check(self, actual: Optional[float], expected: NumberBounds) -> Tuple[bool, str]:
        minimum, maximum = expected
        if actual is None:
            return False, f"{self.field} missing"
        if minimum is not None and actual < minimum:
            return False, f"{self.field}={actual} < min={minimum:g}"
        if maximum is not None and actual > maximum:
            return False, f"{self.field}={actual} > max={maximum:g}"
        return True, ""
