"""Engine and session management for the news database."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from dotenv import load_dotenv
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from news_store.models import Base

load_dotenv()

DEFAULT_DATABASE_PATH = "data/app.db"

_session_factory: sessionmaker | None = None


def get_engine(database_path: str | None = None) -> Engine:
    """Create a SQLite engine, creating the parent directory if needed.

    ":memory:" gives a private in-memory database.
    """
    if database_path is None:
        database_path = os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH)

    if database_path == ":memory:":
        return create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    Path(database_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{database_path}")


def init_db(engine: Engine) -> None:
    """Create tables that don't exist yet."""
    Base.metadata.create_all(engine)


def configure(engine: Engine) -> sessionmaker:
    """Bind the module session factory to an engine."""
    global _session_factory
    _session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """Context manager for a session with automatic commit/rollback."""
    if _session_factory is None:
        configure(get_engine())

    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
