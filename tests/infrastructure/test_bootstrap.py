"""Tests for the composition root."""

import pytest

from catalog.infrastructure import bootstrap
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.in_memory_product_store import (
    InMemoryProductStore,
)


@pytest.fixture
def recorded(monkeypatch):
    calls = []
    monkeypatch.setattr(
        bootstrap,
        "get_settings",
        lambda: Settings(_env_file=None, log_level="ERROR", json_logs=True),
    )
    monkeypatch.setattr(
        bootstrap,
        "configure_logging",
        lambda level, json_logs: calls.append((level, json_logs)),
    )
    return calls


class TestSetupLogging:

    def test_settings_used_by_default(self, recorded):
        bootstrap.setup_logging()
        assert recorded == [("ERROR", True)]

    def test_explicit_level_wins(self, recorded):
        bootstrap.setup_logging(level="DEBUG")
        assert recorded == [("DEBUG", True)]

    def test_explicit_json_flag_wins(self, recorded):
        bootstrap.setup_logging(json_logs=False)
        assert recorded == [("ERROR", False)]


class TestProductStore:

    def test_each_call_builds_an_empty_store(self):
        first = bootstrap.product_store()
        second = bootstrap.product_store()
        assert isinstance(first, InMemoryProductStore)
        assert first is not second
        assert first.list() == ()
