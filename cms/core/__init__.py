"""Core system functionality."""

from .container import Container
from .module_system import Module, ModuleRegistry, ModuleConfig
from .provider import BaseModuleProvider

__all__ = ["Container", "Module", "ModuleRegistry", "ModuleConfig", "BaseModuleProvider"]
