"""
Pytest configuration for the Kudu data generator.

Provides fixtures for:
- Settings with test-specific overrides
- In-memory fakes of the Kudu client, table, session and scanner
- Reachability of a real cluster for integration tests
"""

from __future__ import annotations

import os

import pytest

from kudu_datagen.config import Settings, get_settings
from tests.fakes import FakeKuduClient


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Drop the cached Settings so env changes made by a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def test_settings() -> Settings:
    """
    Settings with a zero insert interval and a bounded run.
    """
    return Settings(
        kudu_masters=os.getenv("KUDU_MASTERS", "localhost:7051"),
        table_name="datagen_test",
        backup_table_name="datagen_test_backup",
        insert_interval_seconds=0.0,
        max_rows=3,
        seed=7,
        log_level="DEBUG",
    )


@pytest.fixture()
def fake_client() -> FakeKuduClient:
    return FakeKuduClient()


@pytest.fixture()
def offline_table_layout(monkeypatch):
    """
    Replace schema and partitioning builders with markers, so table creation
    runs against the fake client without the native Kudu library.
    """
    from kudu_datagen.infrastructure import table_admin

    monkeypatch.setattr(table_admin, "build_schema", lambda spec: ("schema", spec))
    monkeypatch.setattr(table_admin, "build_partitioning", lambda spec: ("hash", spec.hash_buckets))


@pytest.fixture()
def no_sleep(monkeypatch):
    """Run the insert loop started by the modes without pausing between rows."""
    from kudu_datagen.modes import abstract

    original = abstract.insert_rows

    def insert_rows_without_sleep(*args, **kwargs):
        return original(*args, sleep=lambda seconds: None, **kwargs)

    monkeypatch.setattr(abstract, "insert_rows", insert_rows_without_sleep)


@pytest.fixture(scope="session")
def kudu_cluster_available() -> bool:
    """
    Check if a Kudu cluster is reachable at KUDU_MASTERS.

    Used to conditionally skip integration tests when no cluster is running.
    """
    try:
        from kudu_datagen.infrastructure.kudu_factory import connect

        client = connect(os.getenv("KUDU_MASTERS", "localhost:7051"))
        client.list_tables()
        return True
    except Exception:
        return False
