"""
Domain models for the Kudu data generator.

Defines the generated row and the layout of the two-column table the
generator writes to. Both models are frozen and validated on construction.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

KEY_COLUMN = "key"
VALUE_COLUMN = "value"


class GeneratedRow(BaseModel):
    """
    Representation of a single row inserted into the generator table.
    """

    key: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="INT32 key column.")
    value: Optional[str] = Field(None, description="Nullable random payload string.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def as_op_payload(self) -> dict:
        """Column mapping accepted by `table.new_insert`."""
        return {KEY_COLUMN: self.key, VALUE_COLUMN: self.value}


class TableSpec(BaseModel):
    """
    Layout of a generator table: key/value columns hash partitioned on key.
    """

    name: str = Field(..., min_length=1, description="Kudu table name.")
    hash_buckets: int = Field(2, ge=2, description="Hash buckets on the key column.")
    unique_key: bool = Field(
        False, description="Unique primary key instead of a non-unique one."
    )
    n_replicas: Optional[int] = Field(None, ge=1, description="Tablet replication factor.")

    model_config = {"frozen": True}


__all__ = [
    "GeneratedRow",
    "TableSpec",
    "INT32_MIN",
    "INT32_MAX",
    "KEY_COLUMN",
    "VALUE_COLUMN",
]
