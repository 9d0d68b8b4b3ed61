"""Theme discovery and theme-aware rendering."""

from .engine import Theme, UnknownThemeError, View, ViewFactory
from .registry import ThemeDescriptor, ThemeRegistry

__all__ = [
    "Theme",
    "ThemeDescriptor",
    "ThemeRegistry",
    "UnknownThemeError",
    "View",
    "ViewFactory",
]
