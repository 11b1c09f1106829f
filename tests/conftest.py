"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from care_registry.adapters.audit_logger import StructlogAuditLogger
from care_registry.adapters.metrics_collector import InMemoryMetricsCollector
from care_registry.adapters.record_store import InMemoryRecordStore
from care_registry.adapters.seed_data import seed_patients, seed_practitioners
from care_registry.config.models import RegistryConfig
from care_registry.domain.entities import (
    Gender,
    Patient,
    PatientCriteria,
    Practitioner,
    PractitionerCriteria,
)
from care_registry.filters.catalog import patient_stages, practitioner_stages
from care_registry.pipeline.search_pipeline import SearchPipeline
from care_registry.validation.criteria_validator import CriteriaValidator


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding sample config and record files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def default_config() -> RegistryConfig:
    """Create default registry configuration."""
    return RegistryConfig()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def audit_logger() -> StructlogAuditLogger:
    """Create audit logger for testing."""
    return StructlogAuditLogger(verbose=True)


@pytest.fixture
def sparse_patients() -> List[Patient]:
    """Patients with some optional fields missing."""
    return [
        Patient(
            id="S001",
            name="Nora Quinn",
            date_of_birth="1970-01-01",
            gender=Gender.FEMALE,
            email="nora.quinn@email.com",
            phone="+44 (0)20 7946 0958",
            address="1 High St, Oxford, UK",
        ),
        # No email, phone or address
        Patient(
            id="S002",
            name="Omar Quinn",
            date_of_birth="1971-02-02",
            gender=Gender.MALE,
        ),
        Patient(
            id="S003",
            name="Pat Quinn",
            date_of_birth="1972-03-03",
            gender=Gender.OTHER,
            phone="555.0199",
        ),
    ]


@pytest.fixture
def experience_practitioners() -> List[Practitioner]:
    """Practitioners around the 10..15 years boundary, one without a value."""
    return [
        Practitioner(id="E09", name="Dr. Nine", specialty="Cardiology", years_of_experience=9),
        Practitioner(id="E10", name="Dr. Ten", specialty="Cardiology", years_of_experience=10),
        Practitioner(id="E15", name="Dr. Fifteen", specialty="Neurology", years_of_experience=15),
        Practitioner(id="E16", name="Dr. Sixteen", specialty="Neurology", years_of_experience=16),
        Practitioner(id="E00", name="Dr. Unknown", specialty="Surgery"),
    ]


@pytest.fixture
def patient_pipeline(
    metrics_collector: InMemoryMetricsCollector,
    audit_logger: StructlogAuditLogger,
) -> SearchPipeline[Patient]:
    """Patient pipeline over the seed records."""
    return SearchPipeline(
        entity="patient",
        store=InMemoryRecordStore(seed_patients()),
        stages=patient_stages(),
        validator=CriteriaValidator(PatientCriteria),
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )


@pytest.fixture
def practitioner_pipeline(
    metrics_collector: InMemoryMetricsCollector,
    audit_logger: StructlogAuditLogger,
) -> SearchPipeline[Practitioner]:
    """Practitioner pipeline over the seed records."""
    return SearchPipeline(
        entity="practitioner",
        store=InMemoryRecordStore(seed_practitioners()),
        stages=practitioner_stages(),
        validator=CriteriaValidator(PractitionerCriteria),
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )
