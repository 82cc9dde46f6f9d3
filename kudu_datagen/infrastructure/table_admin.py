"""
Table administration for the generator table: schema, partitioning,
create/drop, and the full-scan lookup of the largest key.
"""

from __future__ import annotations

from typing import Any

from kudu_datagen.domain.models import KEY_COLUMN, VALUE_COLUMN, TableSpec
from kudu_datagen.utils.logging import get_logger

log = get_logger(__name__)


def _kudu() -> Any:
    """The kudu module, imported on first use so table admin loads without it."""
    import kudu

    return kudu


def build_schema(spec: TableSpec) -> Any:
    """
    INT32 ``key`` (unique or non-unique primary key) plus nullable STRING ``value``.
    """
    kudu = _kudu()
    builder = kudu.schema_builder()
    key_column = builder.add_column(KEY_COLUMN).type(kudu.int32).nullable(False)
    if spec.unique_key:
        key_column.primary_key()
    else:
        key_column.non_unique_primary_key()
    builder.add_column(VALUE_COLUMN, type_=kudu.string, nullable=True)
    return builder.build()


def build_partitioning(spec: TableSpec) -> Any:
    from kudu.client import Partitioning

    return Partitioning().add_hash_partitions(
        column_names=[KEY_COLUMN], num_buckets=spec.hash_buckets
    )


def table_exists(client: Any, table_name: str) -> bool:
    return bool(client.table_exists(table_name))


def create_table(client: Any, spec: TableSpec) -> None:
    """Create the generator table described by `spec`."""
    client.create_table(
        spec.name,
        build_schema(spec),
        build_partitioning(spec),
        n_replicas=spec.n_replicas,
    )
    log.info(f"Created table: {spec.name}", extra={"table": spec.name})


def drop_table_if_exists(client: Any, table_name: str) -> bool:
    """
    Delete `table_name` when present.

    Returns
    -------
    bool
        True if a table was deleted.
    """
    if not table_exists(client, table_name):
        return False
    log.info(f"Table {table_name} exists. Deleting...", extra={"table": table_name})
    client.delete_table(table_name)
    log.info(f"Deleted table {table_name}", extra={"table": table_name})
    return True


def get_max_key(client: Any, table_name: str) -> int:
    """
    Largest ``key`` in the table, found with a full scan projecting only the
    key column. An empty table yields 0.
    """
    table = client.table(table_name)
    scanner = table.scanner()
    scanner.set_projected_column_names([KEY_COLUMN])
    max_key = 0
    scanned = 0
    try:
        scanner.open()
        while scanner.has_more_rows():
            for (key,) in scanner.next_batch().as_tuples():
                scanned += 1
                if key > max_key:
                    max_key = key
    finally:
        scanner.close()

    log.debug(
        "Scanned table for max key",
        extra={"table": table_name, "rows_scanned": scanned, "max_key": max_key},
    )
    return max_key


__all__ = [
    "build_partitioning",
    "build_schema",
    "create_table",
    "drop_table_if_exists",
    "get_max_key",
    "table_exists",
]
