from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from product_catalog.infra.config import database_url

logger = logging.getLogger(__name__)


def create_store_engine(url: str | None = None) -> Engine:
    """
    Create the process-wide engine for the product store.

    Called once at application startup; the engine (and its connection pool)
    is shared by every request for the lifetime of the process.

    Connection Pool Configuration:
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_timeout: Seconds to wait for a free connection before failing
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)

    Args:
        url: SQLAlchemy URL; defaults to DATABASE_URL
    """
    return create_engine(
        url or database_url(),
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def check_connection(engine: Engine) -> None:
    """Open one connection and run a trivial query; raises if the store is unreachable."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Connected to product store", extra={"dialect": engine.dialect.name})


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
    )


@contextmanager
def get_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Get a read session; rolled back on error and always closed."""
    session = session_factory()

    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
