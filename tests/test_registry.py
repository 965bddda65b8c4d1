"""
Tests for StoreRegistry lifecycle.
"""
import logging

import pytest

from pagesync.core.errors import ResourceExistsError, UnknownResourceError
from pagesync.core.registry import StoreRegistry
from tests.helpers import Recorder


def test_create_and_get():
    registry = StoreRegistry()
    store = registry.create("audits", 25)

    assert registry.get("audits") is store
    assert store.resource == "audits"
    assert store.get_state().page_size == 25
    assert "audits" in registry
    assert len(registry) == 1


def test_create_twice_raises():
    registry = StoreRegistry()
    registry.create("audits", 25)
    with pytest.raises(ResourceExistsError):
        registry.create("audits", 50)


def test_get_unknown_raises_key_error():
    registry = StoreRegistry()
    with pytest.raises(UnknownResourceError) as exc:
        registry.get("nodes")
    assert isinstance(exc.value, KeyError)
    assert "nodes" in str(exc.value)


def test_get_or_create_reuses_store():
    registry = StoreRegistry()
    first = registry.get_or_create("users", 10)
    assert registry.get_or_create("users", 99) is first
    assert first.get_state().page_size == 10


def test_dispose_drops_subscribers_and_frees_name():
    registry = StoreRegistry()
    old = registry.create("users", 10)
    rec = Recorder()
    old.subscribe(rec)

    registry.dispose("users")

    assert "users" not in registry
    assert old.subscriber_count == 0
    with pytest.raises(UnknownResourceError):
        registry.get("users")

    new = registry.create("users", 10)
    assert new is not old


def test_dispose_unknown_is_noop():
    registry = StoreRegistry()
    registry.dispose("nodes")
    registry.dispose("nodes")
    assert len(registry) == 0


def test_dispose_all():
    registry = StoreRegistry()
    registry.create("audits", 10)
    registry.create("users", 10)
    registry.dispose_all()
    assert registry.resources == []


def test_registries_are_isolated():
    one, two = StoreRegistry(), StoreRegistry()
    one.create("audits", 10).apply_collection_refresh(100)
    two.create("audits", 10)

    assert two.get("audits").get_state().total_count == 0


def test_lifecycle_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="pagesync.core.registry")
    registry = StoreRegistry()
    registry.create("audits", 10)
    registry.dispose("audits")

    messages = [r.getMessage() for r in caplog.records]
    assert any("created: audits" in m for m in messages)
    assert any("disposed: audits" in m for m in messages)
    assert all(getattr(r, "resource", None) == "audits" for r in caplog.records)
