"""
Pipeline factories.

Wire a store, the stage catalog, a validator and the default adapters
into a SearchPipeline for each record type.
"""

from __future__ import annotations

from typing import Iterable, Optional

from care_registry.adapters.audit_logger import StructlogAuditLogger
from care_registry.adapters.metrics_collector import InMemoryMetricsCollector
from care_registry.adapters.record_loader import RecordLoader
from care_registry.adapters.record_store import InMemoryRecordStore
from care_registry.adapters.seed_data import seed_patients, seed_practitioners
from care_registry.config.models import RegistryConfig
from care_registry.domain.entities import (
    Patient,
    PatientCriteria,
    Practitioner,
    PractitionerCriteria,
)
from care_registry.filters.catalog import patient_stages, practitioner_stages
from care_registry.pipeline.search_pipeline import MetricsCollectorProtocol, SearchPipeline
from care_registry.validation.criteria_validator import CriteriaValidator


def create_patient_pipeline(
    config: Optional[RegistryConfig] = None,
    records: Optional[Iterable[Patient]] = None,
    metrics_collector: Optional[MetricsCollectorProtocol] = None,
) -> SearchPipeline[Patient]:
    """
    Build the patient search pipeline.

    Args:
        config: Registry configuration (defaults when None)
        records: Records to serve; overrides config and seed data
        metrics_collector: Metrics sink (a fresh in-memory collector when None)
    """
    config = config or RegistryConfig()
    if records is None:
        if config.data.patients_file:
            records = RecordLoader().load(config.data.patients_file, Patient)
        else:
            records = seed_patients()

    return SearchPipeline(
        entity="patient",
        store=InMemoryRecordStore(records),
        stages=patient_stages(),
        validator=CriteriaValidator(
            PatientCriteria,
            strict_date_bounds=config.search.strict_date_bounds,
        ),
        audit_logger=StructlogAuditLogger(verbose=config.logging.verbose_audit),
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
    )


def create_practitioner_pipeline(
    config: Optional[RegistryConfig] = None,
    records: Optional[Iterable[Practitioner]] = None,
    metrics_collector: Optional[MetricsCollectorProtocol] = None,
) -> SearchPipeline[Practitioner]:
    """
    Build the practitioner search pipeline.

    Args:
        config: Registry configuration (defaults when None)
        records: Records to serve; overrides config and seed data
        metrics_collector: Metrics sink (a fresh in-memory collector when None)
    """
    config = config or RegistryConfig()
    if records is None:
        if config.data.practitioners_file:
            records = RecordLoader().load(config.data.practitioners_file, Practitioner)
        else:
            records = seed_practitioners()

    return SearchPipeline(
        entity="practitioner",
        store=InMemoryRecordStore(records),
        stages=practitioner_stages(),
        validator=CriteriaValidator(PractitionerCriteria),
        audit_logger=StructlogAuditLogger(verbose=config.logging.verbose_audit),
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
    )
