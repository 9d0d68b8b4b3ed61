"""Engine and session handling for the settings database."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .models import Base

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_SessionLocal = None


def database_url(db_path: Optional[str] = None, url: Optional[str] = None) -> str:
    """
    Build the SQLAlchemy URL for the settings database.

    An explicit URL wins. Otherwise the path names a SQLite file whose
    directory is created when missing.
    """
    if url:
        return url
    if not db_path:
        raise ValueError("Either database.url or database.path must be configured")

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


def init_db(db_path: Optional[str] = None, url: Optional[str] = None) -> Engine:
    """Create the engine, the session factory and the core_config table."""
    global _engine, _SessionLocal

    close_db()
    url = database_url(db_path, url)

    # request handlers run in a thread pool
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    _engine = create_engine(url, echo=False, connect_args=connect_args)
    _SessionLocal = sessionmaker(bind=_engine, expire_on_commit=False)

    Base.metadata.create_all(_engine)
    logger.info(f"Database ready: {_engine.url.render_as_string(hide_password=True)}")

    return _engine


def close_db():
    """Dispose of the engine; sessions are unavailable until init_db runs again."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()
        logger.debug("Database engine disposed")

    _engine = None
    _SessionLocal = None


@contextmanager
def get_session():
    """Session scope committing on success and rolling back on error."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
