"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the protocols the
search pipeline depends on. Following the Hexagonal Architecture
(Ports & Adapters) pattern.

Stores:
    - InMemoryRecordStore: Immutable record list with an id index
    - RecordLoader: YAML record files
    - seed_patients / seed_practitioners: Built-in records

Loggers:
    - StructlogAuditLogger: Structured audit events

Metrics:
    - InMemoryMetricsCollector: Thread-safe in-memory aggregates

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from care_registry.adapters.audit_logger import StructlogAuditLogger
from care_registry.adapters.metrics_collector import InMemoryMetricsCollector
from care_registry.adapters.record_loader import RecordLoader
from care_registry.adapters.record_store import InMemoryRecordStore
from care_registry.adapters.seed_data import seed_patients, seed_practitioners

__all__ = [
    "InMemoryRecordStore",
    "RecordLoader",
    "seed_patients",
    "seed_practitioners",
    "StructlogAuditLogger",
    "InMemoryMetricsCollector",
]
