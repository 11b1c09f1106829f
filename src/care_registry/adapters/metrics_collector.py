"""
In-Memory Metrics Collector.

Keeps running aggregates per metric name and tag set. Aggregates are
constant-size, so a long-running server does not accumulate samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Optional, Tuple

TagKey = Tuple[Tuple[str, str], ...]


@dataclass
class _Aggregate:
    """Running totals for one metric series."""

    kind: str
    count: int = 0
    total: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    last: Optional[float] = None

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        self.last = value
        self.minimum = value if self.minimum is None else min(self.minimum, value)
        self.maximum = value if self.maximum is None else max(self.maximum, value)

    def summary(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "count": self.count,
            "total": self.total,
            "min": self.minimum,
            "max": self.maximum,
            "last": self.last,
        }


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._series: Dict[str, Dict[TagKey, _Aggregate]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def get_total(self, name: str, tags: Optional[Dict[str, str]] = None) -> float:
        """Total of a series, or 0 if nothing was recorded."""
        with self._lock:
            aggregate = self._series.get(name, {}).get(_tag_key(tags))
            return aggregate.total if aggregate else 0

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summaries of all series.

        Untagged series are keyed by name; tagged series by
        ``name{key=value,...}``.
        """
        with self._lock:
            summary: Dict[str, Any] = {}
            for name, series in self._series.items():
                for tag_key, aggregate in series.items():
                    summary[_series_label(name, tag_key)] = aggregate.summary()
            return summary

    def clear(self) -> None:
        """Clear all metrics."""
        with self._lock:
            self._series.clear()

    def _record(
        self,
        name: str,
        kind: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        key = _tag_key(tags)
        with self._lock:
            series = self._series.setdefault(name, {})
            if key not in series:
                series[key] = _Aggregate(kind=kind)
            series[key].add(value)


def _tag_key(tags: Optional[Dict[str, str]]) -> TagKey:
    return tuple(sorted((k, str(v)) for k, v in (tags or {}).items()))


def _series_label(name: str, tag_key: TagKey) -> str:
    if not tag_key:
        return name
    return name + "{" + ",".join(f"{k}={v}" for k, v in tag_key) + "}"
