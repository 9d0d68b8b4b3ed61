"""Module system for the CMS."""

import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


@dataclass
class ModuleConfig:
    """Configuration for a module."""
    enabled: bool = True
    priority: int = 100  # Lower = loads first
    config: Dict[str, Any] = field(default_factory=dict)


class Module(ABC):
    """Base class for all CMS modules."""

    def __init__(self, config: ModuleConfig):
        """
        Initialize the module.

        Args:
            config: Module configuration
        """
        self.config = config
        self.enabled = config.enabled
        self._provider = None
        self._routers = []

    @property
    @abstractmethod
    def name(self) -> str:
        """Module name (unique identifier, also its package name)."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable module name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Module description."""
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        """Module version."""
        pass

    @property
    def author(self) -> str:
        """Module author."""
        return "CMS Team"

    def initialize(self) -> bool:
        """
        Initialize the module.
        Called once every module has been loaded.

        Returns:
            True if initialization succeeded
        """
        logger.info(f"Initializing module: {self.display_name}")
        return True

    def shutdown(self):
        """Cleanup when module is unloaded."""
        logger.info(f"Shutting down module: {self.display_name}")

    def get_provider(self):
        """
        Get the provider class wiring this module into the application.

        Returns:
            BaseModuleProvider subclass, or None
        """
        return self._provider

    def get_routers(self) -> List[Any]:
        """
        Get the HTTP routers for this module.

        Returns:
            List of FastAPI APIRouter instances
        """
        return self._routers

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<Module: {self.display_name} v{self.version} (enabled={self.enabled})>"


class ModuleRegistry:
    """Registry for managing CMS modules."""

    def __init__(self):
        self._modules: Dict[str, Module] = {}
        self._initialized = False

    def register(self, module: Module):
        """
        Register a module.

        Args:
            module: Module instance to register
        """
        if module.name in self._modules:
            logger.warning(f"Module {module.name} already registered, replacing")

        self._modules[module.name] = module
        logger.info(f"Registered module: {module.display_name} v{module.version}")

    def get(self, module_name: str) -> Optional[Module]:
        """Get a module by name."""
        return self._modules.get(module_name)

    def find(self, module_name: str) -> Optional[Module]:
        """Get a module by name, ignoring case."""
        if not module_name:
            return None
        wanted = module_name.lower()
        for name, module in self._modules.items():
            if name.lower() == wanted:
                return module
        return None

    def get_all(self) -> List[Module]:
        """Get all registered modules."""
        return list(self._modules.values())

    def get_enabled(self) -> List[Module]:
        """Get all enabled modules, lowest priority value first."""
        modules = [m for m in self._modules.values() if m.enabled]
        return sorted(modules, key=lambda m: m.config.priority)

    def initialize_all(self) -> bool:
        """
        Initialize all enabled modules in priority order.

        Returns:
            True if all modules initialized successfully
        """
        if self._initialized:
            logger.warning("Modules already initialized")
            return True

        modules = self.get_enabled()

        for module in modules:
            try:
                if not module.initialize():
                    logger.error(f"Failed to initialize module: {module.name}")
                    return False
            except Exception as e:
                logger.error(f"Error initializing module {module.name}: {e}")
                return False

        self._initialized = True
        logger.info(f"Initialized {len(modules)} modules")
        return True

    def shutdown_all(self):
        """Shutdown all modules."""
        for module in self._modules.values():
            try:
                module.shutdown()
            except Exception as e:
                logger.error(f"Error shutting down module {module.name}: {e}")

        self._initialized = False

    def get_module_info(self) -> List[Dict[str, Any]]:
        """Get information about all modules."""
        return [
            {
                "name": m.name,
                "display_name": m.display_name,
                "description": m.description,
                "version": m.version,
                "author": m.author,
                "enabled": m.enabled,
            }
            for m in self._modules.values()
        ]
