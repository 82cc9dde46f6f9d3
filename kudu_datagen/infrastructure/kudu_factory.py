"""
Kudu client factory utilities for the data generator.

Parses the master address list, opens clients with retry logic for transient
failures (using tenacity), and hands out write sessions bound to a context
manager so buffered operations are flushed on exit.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Generator, List, Optional, Tuple

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from kudu_datagen.config import Settings, get_settings
from kudu_datagen.utils.logging import get_logger

DEFAULT_MASTER_PORT = 7051

FLUSH_AUTO_BACKGROUND = "background"
FLUSH_AUTO_SYNC = "sync"
FLUSH_MANUAL = "manual"

log = get_logger(__name__)


def _kudu() -> Any:
    """The kudu module, imported on first use so the factory loads without it."""
    import kudu

    return kudu


def _flush_error() -> type:
    """Exception type of a failed flush; resolved only once a flush raises."""
    return _kudu().KuduBadStatus


def parse_master_addresses(masters: str) -> Tuple[List[str], List[int]]:
    """
    Split a ``host[:port],host[:port],...`` list into hosts and ports.

    Ports default to 7051 when omitted.

    Raises
    ------
    ValueError
        If the list is empty or an entry has an empty host or a bad port.
    """
    hosts: List[str] = []
    ports: List[int] = []
    for entry in masters.split(","):
        entry = entry.strip()
        if not entry:
            continue
        host, sep, port_text = entry.rpartition(":")
        if not sep:
            host, port_text = entry, str(DEFAULT_MASTER_PORT)
        if not host:
            raise ValueError(f"Invalid Kudu master address '{entry}': empty host")
        try:
            port = int(port_text)
        except ValueError:
            raise ValueError(f"Invalid Kudu master address '{entry}': bad port") from None
        if not 0 < port < 65536:
            raise ValueError(f"Invalid Kudu master address '{entry}': port out of range")
        hosts.append(host)
        ports.append(port)

    if not hosts:
        raise ValueError("No Kudu master addresses configured")
    return hosts, ports


def connect(masters: Optional[str] = None, settings: Optional[Settings] = None) -> Any:
    """
    Open a Kudu client with automatic retry.

    Retries up to ``connect_retry_attempts`` times with exponential backoff
    on Kudu client errors, then re-raises the last one.

    Parameters
    ----------
    masters : str | None
        Comma-separated master list; defaults to settings.kudu_masters.
    settings : Settings | None
        Effective settings for retries and timeouts; defaults to the cached
        environment settings.

    Returns
    -------
    kudu.client.Client
        A connected client.
    """
    settings = settings or get_settings()
    hosts, ports = parse_master_addresses(
        settings.kudu_masters if masters is None else masters
    )
    kudu = _kudu()

    retrying = Retrying(
        stop=stop_after_attempt(settings.connect_retry_attempts),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(kudu.KuduException),
        before_sleep=before_sleep_log(log, logging.WARNING),
        reraise=True,
    )
    return retrying(
        kudu.connect,
        host=hosts,
        port=ports,
        admin_timeout_ms=settings.kudu_admin_timeout_ms,
        rpc_timeout_ms=settings.kudu_rpc_timeout_ms,
    )


@contextmanager
def session_scope(
    client: Any,
    flush_mode: str = FLUSH_AUTO_BACKGROUND,
    timeout_ms: Optional[int] = None,
) -> Generator[Any, None, None]:
    """
    Context manager for a write session that is flushed on exit.

    Example
    -------
        with session_scope(client) as session:
            session.apply(table.new_insert({"key": 1, "value": "abcde"}))
    """
    if timeout_ms is None:
        timeout_ms = get_settings().kudu_session_timeout_ms
    session = client.new_session(flush_mode=flush_mode, timeout_ms=timeout_ms)
    try:
        yield session
    finally:
        try:
            session.flush()
        except _flush_error():
            errors, overflowed = session.get_pending_errors()
            log.error(
                "Final flush failed with %d pending error(s)%s",
                len(errors),
                " (overflowed)" if overflowed else "",
            )
            for err in errors:
                log.error("Row error: %s", err)


__all__ = [
    "DEFAULT_MASTER_PORT",
    "FLUSH_AUTO_BACKGROUND",
    "FLUSH_AUTO_SYNC",
    "FLUSH_MANUAL",
    "connect",
    "parse_master_addresses",
    "session_scope",
]
