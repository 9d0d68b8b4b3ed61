"""Shared test fixtures for the CMS test suite."""

import os
import sys

import pytest
import yaml

# Add parent directory to path so we can import the cms package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cms import config
from cms.core import Module, ModuleConfig, ModuleRegistry
from cms.core.application import Application, create_application
from cms.db import init_db
from cms.themes import Theme, ThemeRegistry, ViewFactory

LAYOUT = "<html><title>{{ title }}</title><body data-theme=\"{{ theme }}\">{{ content }}</body></html>"


def write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class StubModule(Module):
    """Module with a configurable name, for controller tests."""

    def __init__(self, module_name: str, module_config: ModuleConfig = None):
        self._name = module_name
        super().__init__(module_config or ModuleConfig())

    @property
    def name(self) -> str:
        return self._name

    @property
    def display_name(self) -> str:
        return self._name.title()

    @property
    def description(self) -> str:
        return f"{self._name} test module"

    @property
    def version(self) -> str:
        return "0.1.0"


@pytest.fixture
def themes_dir(tmp_path):
    """Themes directory with a frontend, a backend and a config-less theme."""
    themes = tmp_path / "themes"

    write(themes / "default" / "config.yaml", yaml.safe_dump({
        "name": "Default",
        "author": "Test Author",
        "site": "https://default.example",
        "type": "frontend",
        "version": "1.0.0",
        "colors": ["red", "blue"],
    }))
    write(themes / "default" / "layouts" / "basic.html", LAYOUT)
    write(themes / "default" / "layouts" / "wide.html", "<div class=\"wide\">{{ content }}</div>")
    write(themes / "default" / "views" / "pages" / "landing.html", "<p>Landing {{ headline }}</p>")

    write(themes / "admin" / "config.yaml", yaml.safe_dump({
        "name": "Admin",
        "author": "Test Author",
        "site": "https://admin.example",
        "type": "backend",
        "version": "2.0.0",
    }))
    write(themes / "admin" / "layouts" / "basic.html", "<admin>{{ content }}</admin>")

    # No config.yaml: not a registered theme
    write(themes / "broken" / "layouts" / "basic.html", LAYOUT)

    return themes


@pytest.fixture
def views_dir(tmp_path):
    """Application views directory."""
    views = tmp_path / "views"
    write(views / "pages" / "about.html", "<p>About {{ site_name }}</p>")
    write(views / "pages" / "landing.html", "<p>App landing</p>")
    write(views / "custom" / "standalone.html", "<p>Custom {{ name }}</p>")
    return views


@pytest.fixture
def modules_dir(tmp_path):
    """Module views for the blog and shop stub modules."""
    modules = tmp_path / "modules"
    write(modules / "blog" / "views" / "posts" / "index.html",
          "<ul>{% for post in posts %}<li>{{ post }}</li>{% endfor %}</ul>{{ _module.display_name }}")
    write(modules / "shop" / "views" / "cart.html", "<p>Cart {{ items }}</p>")
    return modules


@pytest.fixture
def app_config(tmp_path, themes_dir, views_dir, monkeypatch):
    """Write and load a test configuration."""
    monkeypatch.delenv("CMS_ENV", raising=False)

    settings = {
        "app": {"name": "Test CMS", "env": "testing"},
        "database": {"path": str(tmp_path / "data" / "cms.db")},
        "logging": {"level": "INFO"},
        "themes": {"path": str(themes_dir), "frontend": "default", "backend": "admin"},
        "views": {"path": str(views_dir)},
        "http": {"middleware": ["timer", "security_headers"]},
        "modules": {"core": {"enabled": True, "priority": 10}},
        "module_settings": {"fail_on_error": True},
    }
    config_path = write(tmp_path / "config" / "config.yaml", yaml.safe_dump(settings))
    config.load_config(str(config_path))

    return config_path


@pytest.fixture
def test_db(app_config):
    """Initialize a temporary test database."""
    db_path = config.get("database.path")
    init_db(db_path)
    return db_path


@pytest.fixture
def application(test_db):
    """Fully booted application with the bundled modules."""
    return create_application()


@pytest.fixture
def controller_app(app_config, themes_dir, views_dir, modules_dir):
    """Application wired with stub blog and shop modules."""
    app = Application()

    factory = ViewFactory(str(themes_dir), str(views_dir), str(modules_dir))
    app.instance("view", factory)
    app.bind("theme", lambda container: Theme(factory))
    app.instance("themes", ThemeRegistry(str(themes_dir)))

    registry = ModuleRegistry()
    registry.register(StubModule("blog"))
    registry.register(StubModule("shop"))
    app.instance("modules", registry)

    return app


@pytest.fixture
def stub_module():
    """Factory for named test modules."""
    return StubModule
