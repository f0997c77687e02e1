"""Tests for settings loading."""

from hello_mvc.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite://"
    assert settings.is_sqlite
    assert settings.log_format == "text"
    assert settings.templates_dir.endswith("templates")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HELLO_MVC_SEED_ITEMS", "false")
    monkeypatch.setenv("HELLO_MVC_LOG_FORMAT", "json")

    settings = Settings(_env_file=None)

    assert settings.seed_items is False
    assert settings.log_format == "json"
