"""
Infrastructure package for the Kudu data generator.

Centralizes Kudu connectivity (client factory, write sessions) and table
administration. Keep this layer focused on I/O against the cluster,
decoupled from mode selection and the insert loop.
"""

from kudu_datagen.infrastructure.kudu_factory import (
    connect,
    parse_master_addresses,
    session_scope,
)
from kudu_datagen.infrastructure.table_admin import (
    create_table,
    drop_table_if_exists,
    get_max_key,
    table_exists,
)

__all__ = [
    "connect",
    "create_table",
    "drop_table_if_exists",
    "get_max_key",
    "parse_master_addresses",
    "session_scope",
    "table_exists",
]
