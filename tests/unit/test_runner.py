from __future__ import annotations

import pytest

from kudu_datagen import runner
from kudu_datagen.modes.clean import CleanStartMode
from kudu_datagen.runner import available_modes, resolve_mode, run_mode
from tests.fakes import FakeKuduClient

pytestmark = pytest.mark.usefixtures("offline_table_layout", "no_sleep")


def test_available_modes_is_sorted():
    assert available_modes() == ["clean", "resume"]


def test_resolve_mode_is_case_insensitive(test_settings):
    assert isinstance(resolve_mode("CLEAN", test_settings), CleanStartMode)


def test_resolve_mode_rejects_unknown(test_settings):
    with pytest.raises(ValueError, match="Unknown mode 'wipe'"):
        resolve_mode("wipe", test_settings)


def test_run_mode_connects_with_effective_settings(test_settings):
    client = FakeKuduClient()
    requested = []

    def client_factory(masters, settings):
        requested.append((masters, settings))
        return client

    stats = run_mode("clean", settings=test_settings, client_factory=client_factory, report=False)

    assert requested == [(test_settings.kudu_masters, test_settings)]
    assert stats is not None
    assert stats.rows_applied == test_settings.max_rows
    assert [row["key"] for row in client.rows["datagen_test"]] == [1, 2, 3]


def test_run_mode_prints_summary_on_failure(test_settings, monkeypatch):
    client = FakeKuduClient(tables={"datagen_test": [1]})
    summaries = []
    monkeypatch.setattr(runner, "print_summary", summaries.append)

    def broken_table(name):
        raise RuntimeError("tablet server unavailable")

    client.table = broken_table

    with pytest.raises(RuntimeError, match="tablet server unavailable"):
        run_mode("clean", settings=test_settings, client_factory=lambda masters, settings: client)

    (stats,) = summaries
    assert stats.rows_applied == 0


def test_run_mode_propagates_connect_failure(test_settings):
    def client_factory(masters, settings):
        raise ConnectionError("no masters")

    with pytest.raises(ConnectionError):
        run_mode("resume", settings=test_settings, client_factory=client_factory)
