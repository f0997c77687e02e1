"""Tests for application startup: logging setup and item seeding."""

import logging

import pytest
from fastapi.testclient import TestClient

from hello_mvc import main, observability
from hello_mvc.database import SessionLocal
from hello_mvc.repositories import ItemRepository


@pytest.fixture
def startup_db():
    """The application's own session, emptied again after the test."""
    root = logging.getLogger()
    level = root.level
    db = SessionLocal()
    yield db
    if observability._handler is not None:
        root.removeHandler(observability._handler)
    root.setLevel(level)
    ItemRepository(db).clear_store()
    db.close()


def test_startup_seeds_items(startup_db, monkeypatch):
    monkeypatch.setattr(main.settings, "seed_items", True)

    with TestClient(main.app) as client:
        assert client.get("/health").status_code == 200

    names = [item.item_name for item in ItemRepository(startup_db).find_all()]
    assert names == ["itemA", "itemB"]


def test_startup_without_seeding(startup_db, monkeypatch):
    monkeypatch.setattr(main.settings, "seed_items", False)

    with TestClient(main.app):
        pass

    assert ItemRepository(startup_db).count() == 0


def test_startup_configures_logging(startup_db, monkeypatch):
    monkeypatch.setattr(main.settings, "log_level", "DEBUG")

    with TestClient(main.app):
        assert observability._handler in logging.getLogger().handlers
        assert logging.getLogger().level == logging.DEBUG
