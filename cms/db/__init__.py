"""Database models and session management."""

from .models import Base, DBConfig
from .session import close_db, database_url, get_session, init_db

__all__ = [
    "Base",
    "close_db",
    "database_url",
    "DBConfig",
    "get_session",
    "init_db",
]
