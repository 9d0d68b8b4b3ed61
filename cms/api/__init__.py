"""HTTP API for the CMS."""

from .main import create_app

__all__ = ["create_app"]
