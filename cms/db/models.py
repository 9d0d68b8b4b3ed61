"""SQLAlchemy database models."""

import json
import logging
from typing import Any, Dict

from sqlalchemy import Column, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

from cms.config import environment

logger = logging.getLogger(__name__)

Base = declarative_base()


class DBConfig(Base):
    """Environment-scoped key/value configuration, values stored as JSON text."""
    __tablename__ = "core_config"
    __table_args__ = (
        UniqueConstraint("environment", "group", "item", name="uq_core_config_setting"),
    )

    id = Column(Integer, primary_key=True)
    environment = Column(String(50), nullable=False)
    group = Column(String(200), nullable=False, default="")
    item = Column(String(200), nullable=False)
    _value = Column("value", Text, nullable=True)

    def __repr__(self):
        return f"<DBConfig(environment='{self.environment}', key='{self.key}')>"

    def set(self, setting: str, value: Any) -> "DBConfig":
        """Fill this record from a dotted setting path and a value."""
        for attr, attr_value in self.explode_setting(setting, value).items():
            setattr(self, attr, attr_value)
        return self

    @staticmethod
    def explode_setting(setting: str, value: Any = None) -> Dict[str, Any]:
        """
        Explode a dotted setting path into its separate parts.

        The last segment is the item, everything before it makes up the group.

        Args:
            setting: Setting path, e.g. 'cms.core.app.themes.frontend'
            value: Value to store for the setting

        Returns:
            Dict with environment, group, item and value
        """
        items = setting.split(".")
        item = items.pop()
        group = ".".join(items)

        parts = {
            "environment": environment(),
            "group": group,
            "item": item,
            "value": value,
        }
        logger.debug(f"Exploded setting {setting}: {parts}")
        return parts

    @property
    def key(self) -> str:
        """Display key, `group.item`."""
        if not self.group:
            return self.item
        key = ".".join([self.group, self.item])
        # module namespaced groups end with '::'
        return key.replace("::.", "::")

    @property
    def value(self) -> Any:
        if self._value is None:
            return None
        try:
            return json.loads(self._value)
        except ValueError:
            return None

    @value.setter
    def value(self, value: Any):
        if value is None or value == "":
            self._value = None
            return
        self._value = json.dumps(value)
