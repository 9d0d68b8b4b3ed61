"""Minimal service container for bindings, shared services and instances."""

import importlib
import logging
from typing import Any, Callable, Dict, Union

logger = logging.getLogger(__name__)

Abstract = Union[str, type]


def class_path(cls: type) -> str:
    """Dotted import path of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def import_class(path: str) -> type:
    """
    Import a class from its dotted path.

    Args:
        path: e.g. 'cms.services.config_store.DatabaseConfigStore'

    Raises:
        ImportError: If the module or attribute does not exist
    """
    module_path, _, name = path.rpartition(".")
    if not module_path:
        raise ImportError(f"Not a dotted class path: {path}")
    module = importlib.import_module(module_path)
    if not hasattr(module, name):
        raise ImportError(f"{module_path} does not export {name}")
    return getattr(module, name)


class Container:
    """
    Resolves services by key.

    A binding's concrete may be a dotted class path, a class (instantiated
    without arguments) or a factory taking the container.
    """

    def __init__(self):
        self._bindings: Dict[str, Any] = {}
        self._shared: Dict[str, bool] = {}
        self._instances: Dict[str, Any] = {}

    @staticmethod
    def _key(abstract: Abstract) -> str:
        return abstract if isinstance(abstract, str) else class_path(abstract)

    def bind(self, abstract: Abstract, concrete: Any, shared: bool = False):
        key = self._key(abstract)
        if key in self._bindings:
            logger.warning(f"Binding {key} already registered, replacing")
        self._bindings[key] = concrete
        self._shared[key] = shared
        self._instances.pop(key, None)
        logger.debug(f"Bound {key}")

    def share(self, abstract: Abstract, factory: Callable[["Container"], Any]):
        """Bind a factory whose result is created once, on first use."""
        self.bind(abstract, factory, shared=True)

    def instance(self, abstract: Abstract, obj: Any):
        key = self._key(abstract)
        self._instances[key] = obj

    def bound(self, abstract: Abstract) -> bool:
        key = self._key(abstract)
        return key in self._bindings or key in self._instances

    def make(self, abstract: Abstract) -> Any:
        """
        Resolve a service.

        Unbound classes are instantiated directly.

        Raises:
            KeyError: If a string key has nothing bound to it
        """
        key = self._key(abstract)
        if key in self._instances:
            return self._instances[key]

        if key not in self._bindings:
            if isinstance(abstract, type):
                return abstract()
            raise KeyError(f"Nothing bound to {key}")

        obj = self._build(self._bindings[key])
        if self._shared.get(key):
            self._instances[key] = obj
        return obj

    def _build(self, concrete: Any) -> Any:
        if isinstance(concrete, str):
            concrete = import_class(concrete)
        if isinstance(concrete, type):
            return concrete()
        return concrete(self)

    def __getitem__(self, abstract: Abstract) -> Any:
        return self.make(abstract)
