"""
Criteria Validator - Validate Search Criteria.

Validates loosely-typed criteria before any filtering:
    - Strings must be strings, numbers must be numbers
    - Enum fields must hold a declared value
    - Range sub-objects accept either, both or neither bound
    - Unknown fields are ignored

Design Notes:
    - Fail-fast principle
    - Clear error messages naming the offending field
    - Pure: no side effects, identical input gives identical output
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, List, Optional, Type, TypeVar

import pydantic
from pydantic.alias_generators import to_camel

from care_registry.domain.dates import parse_calendar_date
from care_registry.domain.entities import DateRange, LookupRequest, SearchCriteria

logger = logging.getLogger(__name__)

CriteriaT = TypeVar("CriteriaT", bound=SearchCriteria)


class ValidationError(Exception):
    """Raised when criteria or lookup input fails validation."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class CriteriaValidator(Generic[CriteriaT]):
    """
    Validates raw criteria into a strict criteria model.

    Validates:
        - Input is a mapping (None means "no criteria")
        - Field types against the criteria model
        - Date range bounds parse as dates (strict mode only)
    """

    def __init__(
        self,
        criteria_model: Type[CriteriaT],
        strict_date_bounds: bool = False,
    ) -> None:
        """
        Initialize criteria validator.

        Args:
            criteria_model: Criteria model to validate into
            strict_date_bounds: Reject unparsable date range bounds
                                instead of treating them as open-ended
        """
        self.criteria_model = criteria_model
        self.strict_date_bounds = strict_date_bounds

    def validate(self, raw: Any) -> CriteriaT:
        """
        Validate raw criteria.

        Args:
            raw: Mapping of criteria, a criteria model, or None

        Returns:
            Validated criteria model

        Raises:
            ValidationError: If validation fails
        """
        if isinstance(raw, self.criteria_model):
            criteria = raw
        else:
            criteria = self._parse(raw)

        if self.strict_date_bounds:
            errors = self._check_date_bounds(criteria)
            if errors:
                field, _ = errors[0]
                error_message = "; ".join(f"{f}: {m}" for f, m in errors)
                logger.error(f"Criteria validation failed: {error_message}")
                raise ValidationError(error_message, field=field)

        logger.debug(f"Criteria validated: {criteria.present_fields()}")
        return criteria

    def validate_lookup(self, raw: Any) -> str:
        """
        Validate lookup input and return the requested id.

        Args:
            raw: An id string or a mapping with an ``id`` key

        Raises:
            ValidationError: If the id is missing or not a string
        """
        if isinstance(raw, str):
            return raw
        if not isinstance(raw, Mapping):
            raise ValidationError(
                f"Lookup input must be an object, got {type(raw).__name__}"
            )
        try:
            return LookupRequest.model_validate(dict(raw)).id
        except pydantic.ValidationError as exc:
            raise self._translate(exc) from exc

    def _parse(self, raw: Any) -> CriteriaT:
        """Run model validation and translate pydantic errors."""
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            message = f"Criteria must be an object, got {type(raw).__name__}"
            logger.error(f"Criteria validation failed: {message}")
            raise ValidationError(message)

        try:
            return self.criteria_model.model_validate(dict(raw))
        except pydantic.ValidationError as exc:
            error = self._translate(exc)
            logger.error(f"Criteria validation failed: {error.message}")
            raise error from exc

    def _translate(self, exc: pydantic.ValidationError) -> ValidationError:
        """Convert pydantic errors into a single ValidationError."""
        errors: List[tuple[str, str]] = []
        for detail in exc.errors():
            field = ".".join(str(part) for part in detail["loc"]) or "<root>"
            errors.append((field, detail["msg"]))

        error_message = "; ".join(f"{field}: {msg}" for field, msg in errors)
        return ValidationError(error_message, field=errors[0][0] if errors else None)

    def _check_date_bounds(self, criteria: SearchCriteria) -> List[tuple[str, str]]:
        """Check every date range bound parses as a calendar date."""
        errors: List[tuple[str, str]] = []
        for name in type(criteria).model_fields:
            value = getattr(criteria, name)
            if not isinstance(value, DateRange):
                continue
            for bound in ("start", "end"):
                bound_value = getattr(value, bound)
                if bound_value is not None and parse_calendar_date(bound_value) is None:
                    errors.append(
                        (
                            f"{to_camel(name)}.{bound}",
                            f"'{bound_value}' is not a valid ISO date",
                        )
                    )
        return errors
