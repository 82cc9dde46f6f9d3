"""
Start-mode interfaces for the Kudu data generator.

A start mode prepares the table(s) and decides the first key, then hands
over to the insert loop. Concrete modes implement the StartMode protocol
(or subclass AbstractStartMode) so the runner can resolve them by name.
"""

from __future__ import annotations

import abc
from typing import Any, Optional, Protocol, runtime_checkable

from kudu_datagen.config import Settings
from kudu_datagen.domain.models import TableSpec
from kudu_datagen.domain.stats import InsertStats
from kudu_datagen.inserter import insert_rows

FIRST_KEY = 1


@runtime_checkable
class StartMode(Protocol):
    """
    Common interface all start modes implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier, as typed on the command line.
    description : str
        A human-friendly summary of what the mode does to the cluster.
    stats : InsertStats | None
        Counters of the insert run, set once the start key is known.
    """

    name: str
    description: str
    stats: Optional[InsertStats]

    def execute(self, client: Any) -> InsertStats:
        """
        Prepare the table and run the insert loop.

        Parameters
        ----------
        client : kudu.client.Client
            Connected client.

        Returns
        -------
        InsertStats
            Counters of the (bounded) run.
        """
        ...


class AbstractStartMode(abc.ABC):
    """
    ABC helper carrying the settings and the shared insert step.

    Subclasses set `name` and `description` and implement `execute`.
    """

    name: str
    description: str

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.stats: Optional[InsertStats] = None

    def table_spec(self, table_name: str) -> TableSpec:
        return TableSpec(
            name=table_name,
            hash_buckets=self.settings.hash_buckets,
            unique_key=self.settings.unique_key,
            n_replicas=self.settings.n_replicas,
        )

    def insert_from(self, client: Any, start_key: int) -> InsertStats:
        self.stats = InsertStats(table=self.settings.table_name, start_key=start_key)
        return insert_rows(
            client,
            self.settings.table_name,
            start_key,
            interval_seconds=self.settings.insert_interval_seconds,
            value_length=self.settings.value_length,
            max_rows=self.settings.max_rows,
            seed=self.settings.seed,
            session_timeout_ms=self.settings.kudu_session_timeout_ms,
            stats=self.stats,
        )

    @abc.abstractmethod
    def execute(self, client: Any) -> InsertStats:  # pragma: no cover - interface only
        """Prepare the table and run the insert loop."""
        raise NotImplementedError


__all__ = ["FIRST_KEY", "AbstractStartMode", "StartMode"]
