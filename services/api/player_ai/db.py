"""Database session and connectivity helpers for the API service.

This module centralizes SQLAlchemy engine/session construction and provides the
FastAPI dependency (`get_db`) used by route handlers.

Design goals:
- single source of truth for DATABASE_URL parsing
- short-lived, request-scoped DB sessions
- safe teardown/rollback on errors
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from .settings import get_settings


class Base(DeclarativeBase):
    """Declarative base for the service's ORM models."""


def make_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for `database_url`.

    SQLite connections are shared across the FastAPI worker threads, so the
    same-thread check is disabled for them. Other backends get
    `pool_pre_ping=True` to reduce failures from stale pooled connections in
    long-running containers.

    Args:
        database_url: SQLAlchemy-compatible connection string.

    Returns:
        sqlalchemy.engine.Engine: Configured engine.
    """
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url, pool_pre_ping=True)


engine = make_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine)


def get_db(request: Request):
    """FastAPI dependency that yields a request-scoped SQLAlchemy session.

    The session factory is taken from `app.state.session_factory` so an
    application built with a different engine (tests, jobs) gets its own
    sessions.

    Yields:
        sqlalchemy.orm.Session: An open SQLAlchemy session for the duration of the request.

    Notes:
        Transaction boundaries are controlled by the repository. If a handler
        raises after a write, the session is rolled back before it is closed so
        the connection returns to the pool in a clean state.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
