"""
Resume: continue after the largest key already stored, creating the table
when it is missing.
"""

from __future__ import annotations

from typing import Any

from kudu_datagen.infrastructure.table_admin import create_table, get_max_key, table_exists
from kudu_datagen.domain.stats import InsertStats
from kudu_datagen.modes.abstract import FIRST_KEY, AbstractStartMode
from kudu_datagen.utils.logging import get_logger

log = get_logger(__name__)


class ResumeMode(AbstractStartMode):
    """
    Insert from ``max(key) + 1``.

    The maximum comes from a full scan of the key column, so start-up time
    grows with table size.
    """

    name: str = "resume"
    description: str = "Continue from the largest stored key; create the table if missing."

    def execute(self, client: Any) -> InsertStats:
        table_name = self.settings.table_name
        if not table_exists(client, table_name):
            log.info("Table does not exist, creating a new one.", extra={"table": table_name})
            create_table(client, self.table_spec(table_name))
            return self.insert_from(client, FIRST_KEY)

        start_key = get_max_key(client, table_name) + 1
        log.info(f"Resuming insert from key: {start_key}", extra={"table": table_name})
        return self.insert_from(client, start_key)


__all__ = ["ResumeMode"]
