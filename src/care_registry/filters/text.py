"""
Text and Equality Filter Stages.

Stages that compare a record field against a scalar criterion:
    - SubstringFilter: case-insensitive containment
    - ExactMatchFilter: equality (strings, enums, numbers)
    - PhoneFilter: digits-only containment
"""

from __future__ import annotations

import re
from typing import Any, Optional, Tuple

from care_registry.filters.base import RecordStage

_NON_DIGITS = re.compile(r"\D")


def digits_only(value: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGITS.sub("", value)


class SubstringFilter(RecordStage):
    """Match when the criterion is a case-insensitive substring of the field."""

    def _prepare(self, value: str) -> str:
        return value.lower()

    def _check(self, actual: Optional[str], expected: str) -> Tuple[bool, str]:
        if actual is None:
            return False, f"{self.field} missing"
        if expected not in actual.lower():
            return False, f"{self.field}={actual!r} does not contain {expected!r}"
        return True, ""


class ExactMatchFilter(RecordStage):
    """Match when the field equals the criterion."""

    def _check(self, actual: Any, expected: Any) -> Tuple[bool, str]:
        if actual is None:
            return False, f"{self.field} missing"
        if actual != expected:
            return False, f"{self.field}={_display(actual)} != {_display(expected)}"
        return True, ""


class PhoneFilter(RecordStage):
    """
    Match phone numbers on their digits only.

    "555-0101" matches "+1-555-0101". A criterion without digits matches
    every record that has a phone number.
    """

    def _prepare(self, value: str) -> str:
        return digits_only(value)

    def _check(self, actual: Optional[str], expected: str) -> Tuple[bool, str]:
        if actual is None:
            return False, f"{self.field} missing"
        if expected not in digits_only(actual):
            return False, f"{self.field}={actual!r} does not contain digits {expected!r}"
        return True, ""


def _display(value: Any) -> str:
    return repr(getattr(value, "value", value))
