"""Services for the CMS core."""

from .config_store import ConfigStore, DatabaseConfigStore

__all__ = ["ConfigStore", "DatabaseConfigStore"]
