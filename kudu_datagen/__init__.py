"""
Kudu Data Generator - synthetic row feeder for Apache Kudu clusters.

Creates a two-column table (INT32 key, nullable STRING value) hash
partitioned on the key, then inserts generated rows at a fixed cadence:

- ``clean``: drop and recreate the table and its backup, insert from key 1
- ``resume``: continue after the largest stored key, creating the table if missing

Cluster I/O lives in `kudu_datagen.infrastructure`; importing this package
itself does not require the Kudu client library.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from kudu_datagen.config import Settings, get_settings
from kudu_datagen.domain.models import GeneratedRow, TableSpec
from kudu_datagen.generator import KeyRangeExhausted, RowGenerator, random_value
from kudu_datagen.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "GeneratedRow",
    "TableSpec",
    # Generation
    "KeyRangeExhausted",
    "RowGenerator",
    "random_value",
    # Logging
    "configure_logging",
    "get_logger",
]
