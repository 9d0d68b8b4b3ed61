"""Application container and boot sequence."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from cms import config
from cms.db import init_db
from cms.themes import Theme, ThemeRegistry, ViewFactory

from .container import Container
from .module_loader import MODULES_DIR, ModuleLoader
from .module_system import ModuleRegistry

logger = logging.getLogger(__name__)


class MiddlewareRouter:
    """Named middleware aliases, installed on the HTTP app by name."""

    def __init__(self):
        self._middleware: Dict[str, type] = {}

    def middleware(self, name: str, cls: type):
        if name in self._middleware:
            logger.warning(f"Middleware {name} already registered, replacing")
        self._middleware[name] = cls
        logger.debug(f"Registered middleware {name}: {cls.__name__}")

    def get(self, name: str) -> Optional[type]:
        return self._middleware.get(name)

    def all(self) -> Dict[str, type]:
        return dict(self._middleware)


class Application(Container):
    """The CMS application: service container plus boot-time registries."""

    def __init__(self):
        super().__init__()
        self.router = MiddlewareRouter()
        self.commands: List[str] = []
        self._providers = {}
        self._booted = False
        self.instance("app", self)

    def environment(self) -> str:
        return config.environment()

    @property
    def modules(self) -> ModuleRegistry:
        return self.make("modules")

    @property
    def themes(self) -> ThemeRegistry:
        return self.make("themes")

    @property
    def view(self) -> ViewFactory:
        return self.make("view")

    def register(self, provider_class):
        """
        Register a provider class, at most once.

        Returns:
            The provider instance
        """
        if provider_class in self._providers:
            logger.warning(f"Provider {provider_class.__name__} already registered")
            return self._providers[provider_class]

        provider = provider_class(self)
        provider.register()
        self._providers[provider_class] = provider
        logger.info(f"Registered provider: {provider_class.__name__}")
        return provider

    def boot(self):
        """Boot every registered provider."""
        if self._booted:
            return
        for provider in self._providers.values():
            provider.boot()
        self._booted = True


def create_application(modules_dir: Path = MODULES_DIR) -> Application:
    """
    Build and boot the application from the loaded configuration.

    Initializes the database, the theme registry and view factory, loads the
    configured modules and registers their providers.
    """
    init_db(config.get("database.path"), url=config.get("database.url"))

    app = Application()

    themes_path = config.get("themes.path", "public/themes")
    app.instance("themes", ThemeRegistry(themes_path))

    factory = ViewFactory(themes_path, config.get("views.path", "views"), str(modules_dir))
    app.instance("view", factory)
    app.bind("theme", lambda container: Theme(factory))

    registry = ModuleRegistry()
    app.instance("modules", registry)
    loader = ModuleLoader(registry, config.get_config(), modules_dir=modules_dir)
    if not loader.load_all_modules():
        raise RuntimeError("Failed to load modules")

    for module in registry.get_enabled():
        provider_class = module.get_provider()
        if provider_class is not None:
            app.register(provider_class)

    app.boot()
    logger.info(f"Application booted in '{app.environment()}' environment")
    return app
