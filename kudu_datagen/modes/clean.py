"""
Clean start: drop the generator and backup tables, recreate both, and
insert from key 1.
"""

from __future__ import annotations

from typing import Any

from kudu_datagen.infrastructure.table_admin import create_table, drop_table_if_exists
from kudu_datagen.domain.stats import InsertStats
from kudu_datagen.modes.abstract import FIRST_KEY, AbstractStartMode


class CleanStartMode(AbstractStartMode):
    """
    Wipe and recreate the tables before inserting.

    The backup table only gets the drop/create treatment; rows are written to
    the main table. An empty backup table name skips it entirely.
    """

    name: str = "clean"
    description: str = "Delete and recreate the table (and its backup), insert from key 1."

    def execute(self, client: Any) -> InsertStats:
        table_names = [self.settings.table_name]
        if self.settings.backup_table_name:
            table_names.append(self.settings.backup_table_name)

        for table_name in table_names:
            drop_table_if_exists(client, table_name)
        for table_name in table_names:
            create_table(client, self.table_spec(table_name))

        return self.insert_from(client, FIRST_KEY)


__all__ = ["CleanStartMode"]
