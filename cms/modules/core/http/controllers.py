"""Controllers for the core module."""

import logging
from dataclasses import asdict

from cms import config
from cms.http import BaseApiController, BaseController
from cms.services import ConfigStore

logger = logging.getLogger(__name__)

_MISSING = object()


class PagesController(BaseController):
    module_name = "core"

    def home(self) -> str:
        self.set_title("Home")
        return self.set_view("pages.home", {
            "modules": self.app.modules.get_module_info(),
        })

    def about(self) -> str:
        self.set_title("About")
        return self.set_view("pages.about", {"site_name": config.get("app.name", "CMS")}, type="app")

    def landing(self) -> str:
        theme = self.app.themes.find(self.theme_name)
        return self.set_view("pages.landing", {
            "headline": config.get("app.name", "CMS"),
            "theme_label": theme.name if theme else self.theme_name,
        }, type="theme")


class ThemesController(BaseApiController):
    """Lists the installed themes."""

    def index(self):
        themes = self.app.themes.all()
        return self.send_response("ok", 200, [asdict(t) for t in themes.values()])

    def by_type(self, theme_type: str):
        if theme_type == "frontend":
            themes = self.app.themes.get_frontend()
        elif theme_type == "backend":
            themes = self.app.themes.get_backend()
        else:
            return self.send_error(f"Unknown theme type: {theme_type}", 404)
        return self.send_response("ok", 200, [asdict(t) for t in themes.values()])


class ConfigController(BaseApiController):
    """Reads and writes settings stored for the current environment."""

    @property
    def store(self) -> ConfigStore:
        return self.app.make(ConfigStore)

    def index(self):
        return self.send_response("ok", 200, self.store.all())

    def show(self, path: str):
        value = self.store.get(path, _MISSING)
        if value is _MISSING:
            return self.send_error(f"Setting not found: {path}", 404)
        return self.send_response("ok", 200, {"key": path, "value": value})

    def update(self, path: str, value):
        if not self.store.set(path, value):
            return self.send_error(f"Could not save setting: {path}")
        logger.info(f"Setting {path} updated over the API")
        return self.send_response("Setting saved", 200, {"key": path, "value": self.store.get(path)})
