"""Database engine and helpers.

The engine is built from `Settings.DATABASE_URL` by the application
factory and kept on `app.state.engine`; nothing in this module holds a
global connection. Request handlers receive a `Session` through the
`get_session` dependency.
"""

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str) -> Engine:
    """Create an engine for `url`.

    SQLite connections are shared with the request threadpool, and an
    in-memory database is pinned to a single connection so every session
    sees the same tables.
    """
    kwargs = {"echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def create_db_and_tables(engine: Engine):
    """Create database tables using SQLModel metadata.

    Intended for local development and tests; production deployments
    should manage the schema with a migration tool.
    """
    # registers the table classes on SQLModel.metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    """Yield a database `Session` bound to the application's engine."""
    with Session(request.app.state.engine) as session:
        yield session
