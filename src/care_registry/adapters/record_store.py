"""
In-Memory Record Store.

An immutable, ordered collection of records seeded once at startup.
Lookups by id go through an index built at construction.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from care_registry.domain.entities import Record

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class InMemoryRecordStore(Generic[RecordT]):
    """Read-only record store backed by a tuple and an id index."""

    def __init__(self, records: Iterable[RecordT]) -> None:
        """
        Initialize store.

        Args:
            records: Records in insertion order

        Raises:
            ValueError: If two records share an id
        """
        self._records: Tuple[RecordT, ...] = tuple(records)
        self._by_id: Dict[str, RecordT] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise ValueError(f"Duplicate record id: {record.id}")
            self._by_id[record.id] = record

        logger.debug(f"Record store initialized with {len(self._records)} records")

    @property
    def records(self) -> Tuple[RecordT, ...]:
        """All records in insertion order."""
        return self._records

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """Return the record with this exact id, or None."""
        return self._by_id.get(record_id)

    def get_many(self, record_ids: Iterable[str]) -> List[RecordT]:
        """Return records for the given ids, in the given order."""
        return [self._by_id[i] for i in record_ids if i in self._by_id]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id
