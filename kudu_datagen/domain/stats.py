"""
Run counters for the insert loop.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class InsertStats:
    """
    Counters for one insert run.
    """

    table: str
    start_key: int
    last_key: Optional[int] = field(default=None)
    rows_applied: int = field(default=0)
    rows_failed: int = field(default=0)
    start_ts: float = field(default_factory=time.perf_counter)
    end_ts: Optional[float] = field(default=None)

    @property
    def duration_seconds(self) -> float:
        end = self.end_ts if self.end_ts is not None else time.perf_counter()
        return end - self.start_ts

    @property
    def throughput_rows_per_sec(self) -> float:
        duration = self.duration_seconds
        return self.rows_applied / duration if duration > 0 else 0.0

    def as_dict(self) -> dict:
        return {
            "table": self.table,
            "start_key": self.start_key,
            "last_key": self.last_key,
            "rows_applied": self.rows_applied,
            "rows_failed": self.rows_failed,
            "duration_seconds": round(self.duration_seconds, 2),
            "throughput_rows_per_sec": round(self.throughput_rows_per_sec, 2),
        }


__all__ = ["InsertStats"]
