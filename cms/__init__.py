"""CMS module core: themes, controllers, module providers and stored configuration."""

__version__ = "1.0.0"
