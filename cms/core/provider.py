"""Base provider wiring a module's middleware, commands, bindings and composers."""

import logging
from typing import Any, Dict, List, Union

from .container import import_class

logger = logging.getLogger(__name__)

MODULES_NAMESPACE = "cms.modules"


class BaseModuleProvider:
    """
    Registers a module's services with the application at boot.

    Subclasses fill in the tables below. Values may be classes, which are
    registered as they are, or class names resolved inside the module's
    package:

        middleware: {module: {alias: class}}               -> <module>.http.middleware
        commands:   {module: {command_id: class}}          -> <module>.console.commands
        bindings:   {namespace: {interface: impl}}         -> <namespace>.<name>
        composers:  {module: {composer: view or [views]}}  -> <module>.composers
    """

    namespace = MODULES_NAMESPACE

    middleware: Dict[str, Dict[str, Union[str, type]]] = {}
    commands: Dict[str, Dict[str, Union[str, type]]] = {}
    bindings: Dict[str, Dict[Union[str, type], Union[str, type]]] = {}
    composers: Dict[str, Dict[Union[str, type], Union[str, List[str]]]] = {}

    def __init__(self, app):
        self.app = app

    def register(self):
        """Register the provider's tables with the application."""
        self.register_middleware()
        self.register_module_commands()
        self.register_module_bindings()
        self.register_module_composers()

    def boot(self):
        """Called after every provider has been registered."""
        pass

    def provides(self) -> List[str]:
        return []

    def register_middleware(self):
        for module, middlewares in self.middleware.items():
            for name, middleware in middlewares.items():
                cls = self._resolve(middleware, module, "http.middleware")
                self.app.router.middleware(name, cls)

    def register_module_commands(self):
        for module, commands in self.commands.items():
            for command, class_name in commands.items():
                self.app.share(command, self._command_factory(module, class_name))
                self.app.commands.append(command)
                logger.debug(f"Registered command {command}")

    def register_module_bindings(self):
        for namespace, classes in self.bindings.items():
            for interface, bind_as in classes.items():
                abstract = interface if isinstance(interface, type) else f"{namespace}.{interface}"
                concrete = bind_as if isinstance(bind_as, type) else f"{namespace}.{bind_as}"
                self.app.bind(abstract, concrete)

    def register_module_composers(self):
        for module, composers in self.composers.items():
            for composer, views in composers.items():
                if isinstance(views, str):
                    views = [views]
                cls = self._resolve(composer, module, "composers")
                self.app.view.composer(views, cls(self.app))

    def _command_factory(self, module: str, class_name: Union[str, type]):
        def factory(app):
            cls = self._resolve(class_name, module, "console.commands")
            return cls(app)
        return factory

    def _resolve(self, target: Union[str, type], module: str, package: str) -> Any:
        if isinstance(target, type):
            return target
        return import_class(f"{self.namespace}.{module}.{package}.{target}")
