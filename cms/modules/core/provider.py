"""Core module provider."""

import logging

from cms import config
from cms.core import BaseModuleProvider
from cms.services import ConfigStore

logger = logging.getLogger(__name__)


class CoreProvider(BaseModuleProvider):
    middleware = {
        "core": {
            "timer": "ResponseTimerMiddleware",
            "security_headers": "SecurityHeadersMiddleware",
        },
    }

    commands = {
        "core": {
            "theme:list": "ListThemesCommand",
            "config:get": "GetConfigCommand",
            "config:set": "SetConfigCommand",
        },
    }

    bindings = {
        "cms.services.config_store": {
            "ConfigStore": "DatabaseConfigStore",
        },
    }

    composers = {
        "core": {
            "ThemeComposer": "layouts.*",
        },
    }

    def boot(self):
        """Apply settings stored in the database over the file configuration."""
        if not config.get("app.database_overrides", True):
            return
        self.app.make(ConfigStore).apply_to(config.set)
