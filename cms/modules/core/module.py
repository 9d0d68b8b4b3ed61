"""Core module definition."""

from cms.core import Module, ModuleConfig
from .provider import CoreProvider
from .http.routes import api_router, pages_router


class CoreModule(Module):
    """Pages, theme listing and stored settings for the CMS."""

    def __init__(self, config: ModuleConfig):
        super().__init__(config)

        self._provider = CoreProvider
        self._routers = [pages_router, api_router]

    @property
    def name(self) -> str:
        return "core"

    @property
    def display_name(self) -> str:
        return "Core"

    @property
    def description(self) -> str:
        return "Base pages, theme listing and stored configuration"

    @property
    def version(self) -> str:
        return "1.0.0"
