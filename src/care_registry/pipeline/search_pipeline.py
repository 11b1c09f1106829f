"""
Search Pipeline - Main Orchestrator.

The SearchPipeline validates criteria, folds the filter stages over the
record store snapshot and assembles the result with its audit trail.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar

import structlog

from care_registry import __version__
from care_registry.domain.entities import Record, SearchCriteria
from care_registry.domain.value_objects import FilterResult, SearchResult, StageResult

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class RecordStoreProtocol(Protocol[RecordT]):
    """Protocol for record stores."""

    @property
    def records(self) -> Sequence[RecordT]:
        ...

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        ...

    def get_many(self, record_ids: Sequence[str]) -> List[RecordT]:
        ...

    def __len__(self) -> int:
        ...


class FilterStageProtocol(Protocol):
    """Protocol for filter stages."""

    @property
    def name(self) -> str:
        ...

    def is_active(self, criteria: SearchCriteria) -> bool:
        ...

    def apply(self, records: Sequence[Record], criteria: SearchCriteria) -> FilterResult:
        ...


class CriteriaValidatorProtocol(Protocol):
    """Protocol for criteria validators."""

    def validate(self, raw: Any) -> SearchCriteria:
        ...

    def validate_lookup(self, raw: Any) -> str:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def log_search_start(self, store_size: int, criteria: Dict[str, Any]) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        input_count: int,
        output_count: int,
        duration_seconds: float,
        reduction_ratio: float,
    ) -> None:
        ...

    def log_record_filtered(self, record: Record, stage_name: str, reason: str) -> None:
        ...

    def log_search_end(
        self,
        match_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class SearchPipeline(Generic[RecordT]):
    """Search engine for one record type."""

    def __init__(
        self,
        entity: str,
        store: RecordStoreProtocol[RecordT],
        stages: List[FilterStageProtocol],
        validator: CriteriaValidatorProtocol,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            entity: Record type name for logs and metrics ("patient", ...)
            store: Read-only record store
            stages: Ordered list of filter stages
            validator: Criteria validator
            audit_logger: For audit trail (optional)
            metrics_collector: For performance metrics (optional)
        """
        self.entity = entity
        self.store = store
        self.stages = stages
        self.validator = validator
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    def search(self, criteria: Any = None) -> List[RecordT]:
        """
        Return records matching every present criterion, in store order.

        Raises:
            ValidationError: If criteria are malformed
        """
        return self.run(criteria).records

    def get_by_id(self, record_id: Any) -> Optional[RecordT]:
        """
        Return the record with this exact id, or None when there is none.

        Args:
            record_id: Id string, or a mapping with an ``id`` key

        Raises:
            ValidationError: If the id is not a string
        """
        lookup_id = self.validator.validate_lookup(record_id)
        record = self.store.get_by_id(lookup_id)

        if self.metrics_collector:
            self.metrics_collector.record_count(
                "lookup_total",
                1,
                {"entity": self.entity, "found": str(record is not None).lower()},
            )
        logger.debug(f"{self.entity} lookup {lookup_id!r}: found={record is not None}")
        return record

    def run(self, criteria: Any = None) -> SearchResult[RecordT]:
        """
        Execute the search workflow.

        Args:
            criteria: Raw criteria mapping, criteria model, or None

        Returns:
            SearchResult with matching records and audit trail

        Raises:
            ValidationError: If criteria validation fails
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())

        with structlog.contextvars.bound_contextvars(
            correlation_id=correlation_id, entity=self.entity
        ):
            # 1. Validate criteria
            validated = self.validator.validate(criteria)

            if self.audit_logger:
                self.audit_logger.log_search_start(
                    len(self.store), validated.present_fields()
                )

            # 2. Execute active stages over the snapshot
            current: List[RecordT] = list(self.store.records)
            audit_trail: List[StageResult] = []

            for stage in self.stages:
                if not stage.is_active(validated):
                    continue
                stage_result, current = self._execute_stage(stage, current, validated)
                audit_trail.append(stage_result)

            # 3. Record total time
            total_duration = time.perf_counter() - start_time
            metadata = self._build_metadata(correlation_id, total_duration)

            if self.metrics_collector:
                tags = {"entity": self.entity}
                self.metrics_collector.record_timing(
                    "search_total_seconds", total_duration, tags
                )
                self.metrics_collector.record_count(
                    "search_results_total", len(current), tags
                )
            if self.audit_logger:
                self.audit_logger.log_search_end(len(current), total_duration)

        # 4. Build result
        return SearchResult(
            criteria=validated,
            records=current,
            store_size=len(self.store),
            audit_trail=audit_trail,
            metadata=metadata,
        )

    def _execute_stage(
        self,
        stage: FilterStageProtocol,
        records: List[RecordT],
        criteria: SearchCriteria,
    ) -> Tuple[StageResult, List[RecordT]]:
        """Execute a single filter stage."""
        stage_start = time.perf_counter()

        filter_result = stage.apply(records, criteria)

        stage_duration = time.perf_counter() - stage_start

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=filter_result.passed_count,
            duration_seconds=stage_duration,
            filtered_ids=filter_result.rejected_ids,
            filter_reasons=filter_result.rejection_reasons,
        )

        if self.audit_logger:
            for record_id, reason in filter_result.rejection_reasons.items():
                record = self.store.get_by_id(record_id)
                if record:
                    self.audit_logger.log_record_filtered(record, stage.name, reason)
            self.audit_logger.log_stage_end(
                stage_result.stage_name,
                stage_result.input_count,
                stage_result.output_count,
                stage_result.duration_seconds,
                stage_result.reduction_ratio,
            )

        if self.metrics_collector:
            tags = {"entity": self.entity, "stage": stage.name}
            self.metrics_collector.record_timing(
                "stage_duration_seconds", stage_duration, tags
            )
            self.metrics_collector.record_count(
                "records_filtered_total", filter_result.rejected_count, tags
            )

        # Passed ids come back in input order
        passed_records = self.store.get_many(filter_result.passed_ids)

        return stage_result, passed_records

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        """Build result metadata."""
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }
