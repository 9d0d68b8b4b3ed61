"""Tests for file configuration loading."""

import logging
import logging.handlers

import yaml

from cms import config
from cms.logging_setup import setup_logging


class TestConfig:

    def test_dotted_get(self, app_config):
        assert config.get("app.name") == "Test CMS"
        assert config.get("app.missing", "fallback") == "fallback"
        assert config.get("app.name.deeper") is None

    def test_set_creates_sections(self, app_config):
        config.set("cache.redis.host", "localhost")

        assert config.get("cache.redis.host") == "localhost"

    def test_environment_from_file(self, app_config):
        assert config.environment() == "testing"

    def test_environment_variable_wins(self, app_config, monkeypatch):
        monkeypatch.setenv("CMS_ENV", "staging")

        assert config.environment() == "staging"

    def test_relative_paths_resolved_from_project_root(self, tmp_path):
        config_path = tmp_path / "config" / "config.yaml"
        config_path.parent.mkdir()
        config_path.write_text(yaml.safe_dump({
            "database": {"path": "data/cms.db"},
            "themes": {"path": "/srv/themes"},
        }))

        config.load_config(str(config_path))

        assert config.get("database.path") == str(tmp_path.resolve() / "data" / "cms.db")
        assert config.get("themes.path") == "/srv/themes"


class TestSetupLogging:

    def test_file_handler_added_when_configured(self, app_config, tmp_path, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        config.set("logging.file", str(tmp_path / "logs" / "cms.log"))
        config.set("logging.level", "DEBUG")

        setup_logging()

        assert captured["level"] == logging.DEBUG
        assert [type(h) for h in captured["handlers"]] == [
            logging.StreamHandler,
            logging.handlers.TimedRotatingFileHandler,
        ]
        assert (tmp_path / "logs").is_dir()
        captured["handlers"][1].close()

    def test_console_only_by_default(self, app_config, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        setup_logging()

        assert len(captured["handlers"]) == 1
