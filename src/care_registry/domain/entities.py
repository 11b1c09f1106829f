"""
Core Domain Entities.

This module defines the records held by the registry and the criteria
used to search them. Attributes are snake_case; inputs and outputs use
camelCase aliases (``date_of_birth`` <-> ``dateOfBirth``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr
from pydantic.alias_generators import to_camel

# Numbers only: ints are accepted, bools and numeric strings are rejected
StrictNumber = StrictFloat


class Gender(str, Enum):
    """Administrative gender of a patient."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Record(BaseModel):
    """Base class for entries in a record store."""

    id: str = Field(..., min_length=1, description="Unique record identifier")
    name: str = Field(..., description="Display name")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Patient(Record):
    """A patient registered with the practice."""

    date_of_birth: str = Field(..., description="ISO date, e.g. 1985-03-15")
    gender: Gender
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class Practitioner(Record):
    """A clinician who can be searched by specialty and experience."""

    specialty: str
    email: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = None
    years_of_experience: Optional[int] = Field(default=None, ge=0)


# =============================================================================
# Search criteria
# =============================================================================


class _CriteriaModel(BaseModel):
    """Shared configuration for criteria and their sub-objects."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DateRange(_CriteriaModel):
    """Inclusive calendar date range; either bound may be absent."""

    start: Optional[StrictStr] = None
    end: Optional[StrictStr] = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None


class NumberRange(_CriteriaModel):
    """Inclusive numeric range; either bound may be absent."""

    min: Optional[StrictNumber] = None
    max: Optional[StrictNumber] = None

    @property
    def is_bounded(self) -> bool:
        return self.min is not None or self.max is not None


class SearchCriteria(_CriteriaModel):
    """Criteria common to every record type. Absent means unconstrained."""

    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None

    def present_fields(self) -> Dict[str, Any]:
        """Criteria that impose a constraint, keyed by camelCase name."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PatientCriteria(SearchCriteria):
    """Search criteria for patients."""

    date_of_birth: Optional[StrictStr] = None
    date_of_birth_range: Optional[DateRange] = None
    gender: Optional[Gender] = None
    address: Optional[StrictStr] = None


class PractitionerCriteria(SearchCriteria):
    """Search criteria for practitioners."""

    specialty: Optional[StrictStr] = None
    license_number: Optional[StrictStr] = None
    years_of_experience: Optional[StrictNumber] = None
    years_of_experience_range: Optional[NumberRange] = None


class LookupRequest(_CriteriaModel):
    """Input for a lookup by id."""

    id: StrictStr
