"""Tests for environment-driven configuration."""

from pathlib import Path

from lfc_api.config.settings import Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.api_prefix == "/api/v1"
    assert config.graphql_path == "/graphql"
    assert config.default_page_size == 100
    assert config.seed_file.name == "seed.json"
    assert config.seed_file.exists()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/other.db")
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")
    monkeypatch.setenv("GRAPHQL_IDE", "false")
    config = Settings(_env_file=None)
    assert config.database_url == "sqlite:///tmp/other.db"
    assert config.max_page_size == 50
    assert config.graphql_ide is False


def test_cors_origins_from_json(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://www.liverpoolfc.com"]')
    assert Settings(_env_file=None).cors_origins == ["https://www.liverpoolfc.com"]


def test_log_file_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "api.log"))
    config = Settings(_env_file=None)
    assert isinstance(config.log_file, Path)
    assert config.log_file == tmp_path / "api.log"
