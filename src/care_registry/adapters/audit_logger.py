"""
Structlog Audit Logger.

Emits search audit events through structlog. The correlation id and
entity are bound by the pipeline via structlog contextvars, so a single
logger instance is safe to share across concurrent searches.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog

from care_registry.domain.entities import Record


class StructlogAuditLogger:
    """Audit logger writing structured events."""

    def __init__(self, verbose: bool = False, logger_name: str = "care_registry.audit") -> None:
        """
        Initialize audit logger.

        Args:
            verbose: If True, log every filtered record. If False, only summaries.
            logger_name: Name of the structlog logger
        """
        self._verbose = verbose
        self._logger = structlog.get_logger(logger_name)

    def log_search_start(
        self,
        store_size: int,
        criteria: Dict[str, Any],
    ) -> None:
        """Log the start of a search run."""
        self._logger.debug("search_started", store_size=store_size, criteria=criteria)

    def log_stage_end(
        self,
        stage_name: str,
        input_count: int,
        output_count: int,
        duration_seconds: float,
        reduction_ratio: float,
    ) -> None:
        """Log the end of a filter stage."""
        self._logger.debug(
            "stage_completed",
            stage=stage_name,
            input_count=input_count,
            output_count=output_count,
            duration_seconds=round(duration_seconds, 6),
            reduction_ratio=round(reduction_ratio, 4),
        )

    def log_record_filtered(
        self,
        record: Record,
        stage_name: str,
        reason: str,
    ) -> None:
        """Log that a record was filtered out."""
        if self._verbose:
            self._logger.debug(
                "record_filtered", record_id=record.id, stage=stage_name, reason=reason
            )

    def log_search_end(
        self,
        match_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the end of a search run."""
        self._logger.info(
            "search_completed",
            match_count=match_count,
            duration_seconds=round(duration_seconds, 6),
            **(metadata or {}),
        )
