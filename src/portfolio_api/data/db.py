"""Database handle and session management.

This module provides SQLAlchemy 2.x ORM infrastructure including:
- The declarative Base shared by every ORM model
- A ``Database`` handle with an explicit ``open``/``close`` lifecycle
- A context manager for safe, transactional session usage

The handle is created once at application startup and passed to the
repositories that need it; nothing here is module-level mutable state.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from portfolio_api.errors import StorageError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


class Database:
    """Storage handle owning one engine and its session factory.

    Args:
        url: SQLAlchemy connection string.
        echo: Log emitted SQL statements.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StorageError("Database handle is not open")
        return self._engine

    def open(self) -> None:
        """Create the engine and make sure every table exists."""
        if self._engine is not None:
            return

        # Import ORM models so their metadata is registered on Base before create_all.
        from portfolio_api.data import models  # noqa: F401

        engine = create_engine(self.url, echo=self.echo, future=True)
        try:
            Base.metadata.create_all(bind=engine)
        except OperationalError as exc:
            engine.dispose()
            raise StorageError("No se pudo conectar a la base de datos") from exc

        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database opened (%s)", make_url(self.url).get_backend_name())

    def close(self) -> None:
        """Dispose of pooled connections. Safe to call more than once."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations.

        Connection-level failures are re-raised as ``StorageError`` so callers
        see a single storage failure type.
        """
        if self._session_factory is None:
            raise StorageError("Database handle is not open")

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except OperationalError as exc:
            session.rollback()
            logger.error("Storage operation failed: %s", exc)
            raise StorageError() from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def new_id() -> str:
    """Return a fresh record identifier (32 hex characters)."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(UTC)
