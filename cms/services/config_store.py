"""Persisted configuration store backed by the core_config table."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from sqlalchemy.exc import SQLAlchemyError

from cms.config import environment
from cms.db import get_session
from cms.db.models import DBConfig

logger = logging.getLogger(__name__)


class ConfigStore(ABC):
    """Contract for reading and writing environment-scoped settings."""

    @abstractmethod
    def set(self, path: str, value: Any) -> bool:
        """Persist a value under a dotted path. Returns True if saved."""

    @abstractmethod
    def get(self, path: str, default: Any = None) -> Any:
        """Get the stored value for a dotted path."""

    @abstractmethod
    def all(self) -> Dict[str, Any]:
        """Get all stored values keyed by their display key."""

    def apply_to(self, setter: Callable[[str, Any], None]) -> int:
        """
        Push every stored setting through a config setter.

        Cleared settings are skipped so they leave file values in place.

        Args:
            setter: Callable taking a dotted key and a value (e.g. cms.config.set)

        Returns:
            Number of settings applied
        """
        settings = {key: value for key, value in self.all().items() if value is not None}
        for key, value in settings.items():
            setter(key, value)
        if settings:
            logger.info(f"Applied {len(settings)} stored settings for '{environment()}'")
        return len(settings)


class DatabaseConfigStore(ConfigStore):
    """ConfigStore persisting rows through SQLAlchemy."""

    def set(self, path: str, value: Any) -> bool:
        """
        Set a configuration value for the current environment.

        Args:
            path: Dotted setting path, the last segment being the item
            value: Any JSON-serializable value; None or '' clears it

        Returns:
            True if the row was saved
        """
        parts = DBConfig.explode_setting(path, value)
        try:
            with get_session() as session:
                config = self._find(session, parts["environment"], parts["group"], parts["item"])
                if config is None:
                    config = DBConfig()
                    session.add(config)
                config.set(path, value)
                session.commit()

            logger.info(f"Saved setting {path} for environment '{parts['environment']}'")
            return True
        except (SQLAlchemyError, TypeError, ValueError) as e:
            logger.error(f"Error saving setting {path}: {e}")
            return False

    def get(self, path: str, default: Any = None) -> Any:
        parts = DBConfig.explode_setting(path)
        with get_session() as session:
            config = self._find(session, parts["environment"], parts["group"], parts["item"])
            if config is None:
                return default
            return config.value

    def all(self) -> Dict[str, Any]:
        with get_session() as session:
            configs = (
                session.query(DBConfig)
                .filter(DBConfig.environment == environment())
                .order_by(DBConfig.group, DBConfig.item)
                .all()
            )
            return {c.key: c.value for c in configs}

    def _find(self, session, env: str, group: str, item: str):
        return (
            session.query(DBConfig)
            .filter_by(environment=env, group=group, item=item)
            .first()
        )
