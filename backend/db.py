"""
Database setup for the FastAPI backend.
Provides SQLAlchemy engine/session utilities for the database-backed store.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(url: str | URL) -> Engine:
    """Create an engine; SQLite URLs get settings usable across FastAPI threads."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees a fresh empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(parsed, **kwargs)
    return create_engine(parsed, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create tables if they don't exist."""
    from repositories import models  # noqa: F401  Ensures models are registered

    Base.metadata.create_all(bind=engine)
    logger.info("Database connected and tables created on %s", engine.url.render_as_string(hide_password=True))
