"""
Stage catalogs for each record type.

The order is fixed so audit trails and timings are reproducible; it has
no effect on the result since every stage is an intersection.
"""

from __future__ import annotations

from typing import List

from care_registry.filters.base import RecordStage
from care_registry.filters.ranges import DateRangeFilter, NumberRangeFilter
from care_registry.filters.text import ExactMatchFilter, PhoneFilter, SubstringFilter


def patient_stages() -> List[RecordStage]:
    """Stages applied to patient searches."""
    return [
        SubstringFilter("name"),
        ExactMatchFilter("date_of_birth"),
        DateRangeFilter("date_of_birth_range", field="date_of_birth"),
        ExactMatchFilter("gender"),
        SubstringFilter("email"),
        PhoneFilter("phone"),
        SubstringFilter("address"),
    ]


def practitioner_stages() -> List[RecordStage]:
    """Stages applied to practitioner searches."""
    return [
        SubstringFilter("name"),
        SubstringFilter("specialty"),
        SubstringFilter("email"),
        PhoneFilter("phone"),
        SubstringFilter("license_number"),
        ExactMatchFilter("years_of_experience"),
        NumberRangeFilter("years_of_experience_range", field="years_of_experience"),
    ]
