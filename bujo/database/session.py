"""
Database Session Management
============================

Handles database connections, session lifecycle and the
unit-of-work boundary around service operations.
"""

import functools
import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from bujo.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: Override for settings.database_url (tests pass
            "sqlite:///:memory:")
    """
    database_url = database_url or settings.database_url

    # SQLite-specific configuration
    if database_url.startswith("sqlite"):
        # Ensure data directory exists
        if ":///" in database_url:
            db_path = database_url.split(":///")[1]
            if not db_path.startswith(":memory:"):
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)

        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.app_debug
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            # pysqlite must not emit BEGIN itself or SAVEPOINTs break
            dbapi_conn.isolation_level = None
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine, "begin")
        def do_begin(conn):
            conn.exec_driver_sql("BEGIN")

    else:
        engine = create_engine(database_url, echo=settings.app_debug)

    return engine


# Create global engine and session factory
engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for one unit of work.

    Commits when the block exits normally, rolls back everything
    when it raises.

    Usage:
        with get_db_context() as db:
            LabelService(db).create("work", "alice")
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def transactional(method):
    """
    Run a service method as its own all-or-nothing step of the session.

    The decorated method's owner must expose the session as ``self.db``.
    The call runs inside a SAVEPOINT: an exception rolls back only the
    changes this call made and is re-raised unchanged, earlier work on
    the session stays pending for the caller to commit.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            with self.db.begin_nested():
                return method(self, *args, **kwargs)
        except Exception:
            logger.debug("Rolled back savepoint after failure in %s", method.__qualname__)
            raise

    return wrapper


def create_all_tables(engine_instance=None):
    """Create all tables in the database."""
    from bujo.models.base import Base
    import bujo.models  # noqa: F401  (registers every model on Base.metadata)

    if engine_instance is None:
        engine_instance = engine

    Base.metadata.create_all(bind=engine_instance)


def drop_all_tables(engine_instance=None):
    """Drop all tables in the database."""
    from bujo.models.base import Base
    import bujo.models  # noqa: F401

    if engine_instance is None:
        engine_instance = engine

    Base.metadata.drop_all(bind=engine_instance)
