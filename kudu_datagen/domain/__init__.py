"""
Domain package for the Kudu data generator.

Exports the row and table layout models used by the generator, the table
admin helpers and the insert loop.
"""

from kudu_datagen.domain.models import GeneratedRow, TableSpec
from kudu_datagen.domain.stats import InsertStats

__all__ = [
    "GeneratedRow",
    "InsertStats",
    "TableSpec",
]
