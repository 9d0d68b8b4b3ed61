"""Theme discovery from the public themes directory."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

THEME_CONFIG_FILE = "config.yaml"


@dataclass(frozen=True)
class ThemeDescriptor:
    """Metadata read from a theme's config.yaml."""
    name: Optional[str] = None
    author: Optional[str] = None
    site: Optional[str] = None
    type: Optional[str] = None  # frontend or backend
    dir: Optional[str] = None
    version: Optional[str] = None


_DESCRIPTOR_FIELDS = [f.name for f in fields(ThemeDescriptor)]


class ThemeRegistry:
    """
    Registry of the themes installed under a themes directory.

    The directory is scanned once, on first use. Themes added afterwards are
    only picked up by a new registry.
    """

    def __init__(self, themes_path: str):
        self.themes_path = Path(themes_path)
        self._themes: Optional[Dict[str, ThemeDescriptor]] = None

    def gather_info(self):
        """Scan the themes directory and cache each theme's metadata."""
        if self._themes is not None:
            return

        themes = {}
        if not self.themes_path.is_dir():
            logger.warning(f"Themes directory not found: {self.themes_path}")
            self._themes = themes
            return

        for theme_dir in sorted(self.themes_path.iterdir()):
            config_file = theme_dir / THEME_CONFIG_FILE
            if not theme_dir.is_dir() or not config_file.is_file():
                continue

            try:
                with open(config_file) as f:
                    options = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.warning(f"Skipping theme {theme_dir.name}: invalid {THEME_CONFIG_FILE}: {e}")
                continue

            if not isinstance(options, dict):
                logger.warning(f"Skipping theme {theme_dir.name}: {THEME_CONFIG_FILE} is not a mapping")
                continue

            options["dir"] = theme_dir.name
            themes[str(theme_dir.resolve())] = ThemeDescriptor(
                **{key: options.get(key) for key in _DESCRIPTOR_FIELDS}
            )

        self._themes = themes
        logger.info(f"Found {len(themes)} themes in {self.themes_path}")

    def all(self) -> Dict[str, ThemeDescriptor]:
        """All themes keyed by absolute directory path."""
        self.gather_info()
        return dict(self._themes)

    def get_frontend(self) -> Dict[str, ThemeDescriptor]:
        return self._by_type("frontend")

    def get_backend(self) -> Dict[str, ThemeDescriptor]:
        return self._by_type("backend")

    def find(self, name: str) -> Optional[ThemeDescriptor]:
        """Look a theme up by its directory name."""
        for theme in self.all().values():
            if theme.dir == name:
                return theme
        return None

    def _by_type(self, theme_type: str) -> Dict[str, ThemeDescriptor]:
        return {path: theme for path, theme in self.all().items() if theme.type == theme_type}
