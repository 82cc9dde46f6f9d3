"""
Paced insertion loop.

Applies one generated row at a time through an AUTO_FLUSH_BACKGROUND session,
reports pending row errors after every apply, and sleeps a fixed interval
between rows. Without `max_rows` the loop only ends on an error or Ctrl-C.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from kudu_datagen.domain.stats import InsertStats
from kudu_datagen.generator import RowGenerator
from kudu_datagen.infrastructure.kudu_factory import FLUSH_AUTO_BACKGROUND, session_scope
from kudu_datagen.utils.logging import get_logger

log = get_logger(__name__)


def _report_pending_errors(session: Any, key: int, stats: InsertStats) -> None:
    errors, overflowed = session.get_pending_errors()
    if not errors:
        log.info(f"Inserted row with key {key}", extra={"key": key})
        return

    stats.rows_failed += len(errors)
    log.error(
        f"Errors inserting row with key {key}",
        extra={"key": key, "errors": len(errors), "overflowed": overflowed},
    )
    for err in errors:
        log.error("Row error: %s", err)


def insert_rows(
    client: Any,
    table_name: str,
    start_key: int,
    *,
    interval_seconds: float = 1.0,
    value_length: int = 5,
    max_rows: Optional[int] = None,
    seed: Optional[int] = None,
    session_timeout_ms: Optional[int] = None,
    stats: Optional[InsertStats] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> InsertStats:
    """
    Insert generated rows into `table_name` starting at `start_key`.

    Parameters
    ----------
    client : kudu.client.Client
        Connected client.
    table_name : str
        Existing generator table.
    start_key : int
        Key of the first inserted row; later rows increment it by one.
    interval_seconds : float
        Pause between two inserts.
    value_length : int
        Length of the random value string.
    max_rows : int | None
        Stop after this many rows; None loops forever.
    seed : int | None
        Seed for the value RNG.
    session_timeout_ms : int | None
        Write session timeout; defaults to settings.kudu_session_timeout_ms.
    stats : InsertStats | None
        Counters to update in place, so a caller still holds them when the
        loop is interrupted.
    sleep : callable
        Sleep function, swappable in tests.

    Returns
    -------
    InsertStats
        Counters for the finished run.

    Raises
    ------
    KeyRangeExhausted
        When the next key no longer fits INT32.
    """
    if interval_seconds < 0:
        raise ValueError(f"interval_seconds must be >= 0, got {interval_seconds}")
    if stats is None:
        stats = InsertStats(table=table_name, start_key=start_key)

    table = client.table(table_name)
    rows = RowGenerator(start_key=start_key, value_length=value_length, seed=seed)
    log.info(
        f"Inserting into {table_name} from key {start_key}",
        extra={"table": table_name, "start_key": start_key, "max_rows": max_rows},
    )

    try:
        with session_scope(
            client, flush_mode=FLUSH_AUTO_BACKGROUND, timeout_ms=session_timeout_ms
        ) as session:
            for row in rows:
                session.apply(table.new_insert(row.as_op_payload()))
                stats.rows_applied += 1
                stats.last_key = row.key
                _report_pending_errors(session, row.key, stats)

                if max_rows is not None and stats.rows_applied >= max_rows:
                    break
                sleep(interval_seconds)
    finally:
        stats.end_ts = time.perf_counter()

    return stats


__all__ = ["InsertStats", "insert_rows"]
