from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from kudu_datagen.domain.models import TableSpec
from kudu_datagen.infrastructure import table_admin
from kudu_datagen.infrastructure.table_admin import (
    build_schema,
    create_table,
    drop_table_if_exists,
    get_max_key,
    table_exists,
)
from tests.fakes import FakeKuduClient

REPLICAS = 3


class _RecordingColumnSpec:
    """Column spec exposing only the kudu-python ColumnSpec methods build_schema may use."""

    def __init__(self, name: str, calls: list) -> None:
        self.name = name
        self._calls = calls

    def _record(self, method: str, *args: Any) -> "_RecordingColumnSpec":
        self._calls.append((self.name, method) + args)
        return self

    def type(self, type_: Any) -> "_RecordingColumnSpec":
        return self._record("type", type_)

    def nullable(self, is_nullable: bool = True) -> "_RecordingColumnSpec":
        return self._record("nullable", is_nullable)

    def primary_key(self) -> "_RecordingColumnSpec":
        return self._record("primary_key")

    def non_unique_primary_key(self) -> "_RecordingColumnSpec":
        return self._record("non_unique_primary_key")


class _RecordingSchemaBuilder:
    def __init__(self) -> None:
        self.calls: list = []

    def add_column(self, name: str, type_: Any = None, nullable: Any = None) -> _RecordingColumnSpec:
        column = _RecordingColumnSpec(name, self.calls)
        if type_ is not None:
            column.type(type_)
        if nullable is not None:
            column.nullable(nullable)
        return column

    def build(self) -> list:
        return self.calls


@pytest.fixture()
def recording_kudu(monkeypatch):
    fake = SimpleNamespace(schema_builder=_RecordingSchemaBuilder, int32="int32", string="string")
    monkeypatch.setattr(table_admin, "_kudu", lambda: fake)
    return fake


@pytest.mark.parametrize(
    ("unique_key", "key_method"),
    [(False, "non_unique_primary_key"), (True, "primary_key")],
)
def test_build_schema_marks_key_column(recording_kudu, unique_key, key_method):
    calls = build_schema(TableSpec(name="t", unique_key=unique_key))

    assert calls == [
        ("key", "type", "int32"),
        ("key", "nullable", False),
        ("key", key_method),
        ("value", "type", "string"),
        ("value", "nullable", True),
    ]


def test_kudu_column_spec_has_key_methods():
    kudu = pytest.importorskip("kudu")
    column = kudu.schema_builder().add_column("key")
    assert callable(column.primary_key)
    assert callable(column.non_unique_primary_key)


@pytest.mark.parametrize("unique_key", [False, True])
def test_build_schema_has_key_and_value_columns(unique_key):
    pytest.importorskip("kudu")
    schema = build_schema(TableSpec(name="t", unique_key=unique_key))
    names = list(schema.names)
    assert "key" in names
    assert "value" in names
    assert schema[names.index("value")].nullable is True
    assert schema[names.index("key")].nullable is False


def test_create_table_passes_layout(fake_client, offline_table_layout):
    spec = TableSpec(name="t", hash_buckets=4, n_replicas=REPLICAS)

    create_table(fake_client, spec)

    assert table_exists(fake_client, "t")
    (created,) = fake_client.created
    assert created["name"] == "t"
    assert created["schema"] == ("schema", spec)
    assert created["partitioning"] == ("hash", 4)
    assert created["n_replicas"] == REPLICAS


def test_build_partitioning_returns_kudu_partitioning():
    pytest.importorskip("kudu")
    from kudu.client import Partitioning

    partitioning = table_admin.build_partitioning(TableSpec(name="t", hash_buckets=4))
    assert isinstance(partitioning, Partitioning)


def test_drop_table_if_exists():
    client = FakeKuduClient(tables={"t": [1]})
    assert drop_table_if_exists(client, "t") is True
    assert drop_table_if_exists(client, "t") is False
    assert client.deleted == ["t"]


def test_get_max_key_scans_all_batches():
    client = FakeKuduClient(tables={"t": [3, 41, 7, 12, 40]})

    assert get_max_key(client, "t") == 41

    (scanner,) = client.scanners
    assert scanner.projected == ["key"]
    assert scanner.opened
    assert scanner.closed


def test_get_max_key_of_empty_table_is_zero():
    client = FakeKuduClient(tables={"t": []})
    assert get_max_key(client, "t") == 0
    assert client.scanners[0].closed
