"""Configuration management."""

import os
import yaml
from pathlib import Path
from typing import Any, Dict

_config: Dict[str, Any] = {}
_base_path: Path = None

# Keys holding filesystem paths that may be given relative to the project root
_PATH_KEYS = [
    ("database", "path"),
    ("logging", "file"),
    ("themes", "path"),
    ("views", "path"),
]


def load_config(config_path: str = None) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    global _config, _base_path

    if config_path is None:
        # Try to find config in common locations
        possible_paths = [
            Path("config/config.yaml"),
            Path("config.yaml"),
            Path.home() / ".config" / "cms" / "config.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            raise FileNotFoundError(
                "No config.yaml found. Copy config/config.example.yaml to config/config.yaml "
                "and fill in your values."
            )

    config_path = Path(config_path)
    _base_path = config_path.resolve().parent.parent  # Project root

    with open(config_path) as f:
        _config = yaml.safe_load(f) or {}

    # Resolve relative paths
    _resolve_paths()

    return _config


def _resolve_paths():
    """Resolve relative paths in config to absolute paths."""
    for section, key in _PATH_KEYS:
        if isinstance(_config.get(section), dict) and _config[section].get(key):
            path = Path(_config[section][key])
            if not path.is_absolute():
                _config[section][key] = str(_base_path / path)


def get_config() -> Dict[str, Any]:
    """Get the loaded configuration."""
    if not _config:
        load_config()
    return _config


def get(key: str, default: Any = None) -> Any:
    """Get a config value by dot-notation key (e.g., 'themes.frontend')."""
    if not _config:
        load_config()

    keys = key.split(".")
    value = _config
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


def set(key: str, value: Any):
    """Set a config value by dot-notation key, creating sections as needed."""
    if not _config:
        load_config()

    keys = key.split(".")
    section = _config
    for k in keys[:-1]:
        if not isinstance(section.get(k), dict):
            section[k] = {}
        section = section[k]
    section[keys[-1]] = value


def environment() -> str:
    """Active deployment environment (CMS_ENV overrides app.env)."""
    return os.environ.get("CMS_ENV") or get("app.env", "production")
