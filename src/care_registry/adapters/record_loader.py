"""
Record Loader - YAML Record Files.

Loads a YAML list of records (camelCase keys) and validates each entry
into its record model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Type, TypeVar, Union

import yaml

from care_registry.domain.entities import Record

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class RecordLoader:
    """Loads and validates records from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize record loader.

        Args:
            base_path: Base path for relative record file paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        path: Union[str, Path],
        record_model: Type[RecordT],
    ) -> List[RecordT]:
        """
        Load records from a YAML file.

        Args:
            path: Path to a YAML file holding a list of records
            record_model: Model each entry is validated into

        Returns:
            Records in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file does not hold a list
            pydantic.ValidationError: If an entry is invalid
        """
        resolved = self._resolve_path(path)
        with open(resolved, encoding="utf-8") as f:
            entries = yaml.safe_load(f) or []

        if not isinstance(entries, list):
            raise ValueError(
                f"Record file {resolved} must contain a list, "
                f"got {type(entries).__name__}"
            )

        records = [record_model.model_validate(entry) for entry in entries]
        logger.info(
            f"Loaded {len(records)} {record_model.__name__} records from {resolved}"
        )
        return records

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve record path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p
