"""Module loader for loading CMS modules from configuration."""

import logging
import importlib
from pathlib import Path
from typing import Dict, List, Optional
from .module_system import ModuleRegistry, ModuleConfig

logger = logging.getLogger(__name__)

MODULES_PACKAGE = "cms.modules"
MODULES_DIR = Path(__file__).parent.parent / "modules"


class ModuleLoader:
    """Loads and initializes CMS modules from configuration."""

    def __init__(self, registry: ModuleRegistry, config: Optional[Dict] = None,
                 modules_dir: Path = MODULES_DIR, package: str = MODULES_PACKAGE):
        """
        Initialize the module loader.

        Args:
            registry: Registry the loaded modules are added to
            config: Dict with 'modules' and 'module_settings' sections
            modules_dir: Directory holding one package per module
            package: Import path of modules_dir
        """
        self.registry = registry
        self.config = config or {}
        self.modules_dir = Path(modules_dir)
        self.package = package

    def get_available_modules(self) -> List[str]:
        """
        Discover available modules in the modules directory.

        Returns:
            List of module names
        """
        if not self.modules_dir.exists():
            logger.warning(f"Modules directory not found: {self.modules_dir}")
            return []

        available = []
        for module_dir in sorted(self.modules_dir.iterdir()):
            if module_dir.is_dir() and not module_dir.name.startswith('_'):
                # Check if module.py exists
                if (module_dir / "module.py").exists():
                    available.append(module_dir.name)

        logger.info(f"Found {len(available)} available modules: {available}")
        return available

    def load_module(self, module_name: str, module_config: Dict) -> bool:
        """
        Load a single module.

        Args:
            module_name: Name of the module to load
            module_config: Module configuration dict

        Returns:
            True if module loaded successfully
        """
        try:
            module_path = f"{self.package}.{module_name}.module"
            module_package = importlib.import_module(module_path)

            # Get the module class (assumes it's named {ModuleName}Module)
            class_name = f"{module_name.replace('_', ' ').title().replace(' ', '')}Module"

            if not hasattr(module_package, class_name):
                logger.error(f"Module {module_name} does not export {class_name}")
                return False

            module_class = getattr(module_package, class_name)

            config = ModuleConfig(
                enabled=module_config.get('enabled', True),
                priority=module_config.get('priority', 100),
                config=module_config.get('config', {})
            )

            self.registry.register(module_class(config))

            logger.info(f"Loaded module: {module_name}")
            return True

        except ImportError as e:
            logger.error(f"Failed to load module {module_name}: {e}")
            return False

    def load_all_modules(self) -> bool:
        """
        Load all enabled modules from configuration.

        Returns:
            True if all modules loaded successfully
        """
        modules_config = self.config.get('modules') or {}
        module_settings = self.config.get('module_settings') or {}

        loaded = 0
        failed = 0

        for module_name in self.get_available_modules():
            module_config = modules_config.get(module_name) or {}

            # Skip if explicitly disabled
            if not module_config.get('enabled', True):
                logger.info(f"Skipping disabled module: {module_name}")
                continue

            if self.load_module(module_name, module_config):
                loaded += 1
            else:
                failed += 1
                if module_settings.get('fail_on_error', False):
                    logger.error("Failing due to module load error (fail_on_error=true)")
                    return False

        logger.info(f"Module loading complete: {loaded} loaded, {failed} failed")

        if not self.registry.initialize_all():
            logger.error("Failed to initialize modules")
            return False

        return True
