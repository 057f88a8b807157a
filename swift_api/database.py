"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 with SQLite for the Books API.

Storage Modes
=============
The engine is chosen once, at import time, from Settings.database_url:

1. No DATABASE_URL: an in-memory SQLite database. In-memory SQLite lives
   only as long as the connection that created it, so the engine pools
   exactly one connection and never opens a second. A session checks that
   connection out for the length of one transaction; other sessions wait
   for it to be returned, so concurrent requests never share a transaction.
   Disposing the engine at shutdown closes it (and discards the data).
2. DATABASE_URL set: a durable database at that location. Tables that
   already exist are reused as-is; missing ones are created, or brought up
   to date with Alembic when AUTO_MIGRATE is enabled.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure
4. Close session when request ends

This is implemented using FastAPI's dependency injection.
"""

import logging
from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool

from swift_api.config import Settings, get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

MEMORY_DATABASE_URL = "sqlite://"

# Seconds a session waits for the in-memory connection before failing
MEMORY_POOL_TIMEOUT = 30


# =============================================================================
# Database Engine
# =============================================================================
def create_db_engine(settings: Settings) -> Engine:
    """
    Build the engine for the configured storage mode.

    check_same_thread=False is required for SQLite because FastAPI runs
    sync endpoints in a threadpool, so a connection may be used by a
    different thread than the one that opened it.

    Args:
        settings: Application settings

    Returns:
        SQLAlchemy Engine
    """
    if settings.uses_memory_database:
        logger.info("DATABASE_URL not set - using in-memory SQLite database")
        return create_engine(
            MEMORY_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=QueuePool,
            pool_size=1,
            max_overflow=0,  # a second connection would open an empty database
            pool_timeout=MEMORY_POOL_TIMEOUT,
            echo=settings.debug,
        )

    url = settings.database_url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    logger.info("Using durable database from DATABASE_URL")
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=settings.debug,  # Log SQL in debug mode
    )


engine = create_db_engine(settings)


# =============================================================================
# Session Factory
# =============================================================================
# expire_on_commit=False keeps loaded attributes readable after commit, so a
# deleted book can still be serialized back to the client.

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it,
    even if the request handler raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Schema Setup
# =============================================================================
def create_tables(bind: Engine | None = None) -> None:
    """
    Create all missing tables.

    Existing tables are left untouched, so this is safe to call on every
    startup against a durable store.
    """
    # Register models on Base.metadata before create_all runs
    import swift_api.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only for tests and local resets.
    """
    Base.metadata.drop_all(bind=bind or engine)


def run_migrations(
    bind: Engine | None = None,
    config_path: str | None = None,
) -> None:
    """
    Upgrade the database to the latest Alembic revision.

    The connection is handed to alembic/env.py through config.attributes,
    so the migration runs against exactly this engine.

    Args:
        bind: Engine to migrate (defaults to the application engine)
        config_path: alembic.ini location (defaults to ALEMBIC_CONFIG)
    """
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config(config_path or settings.alembic_config)
    alembic_cfg.attributes["configure_logger"] = False

    with (bind or engine).begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")

    logger.info("Database migrated to latest revision")


def init_db(
    bind: Engine | None = None,
    app_settings: Settings | None = None,
) -> None:
    """
    Prepare the schema before the application accepts requests.

    An in-memory database is always created fresh. A durable database is
    migrated when AUTO_MIGRATE is enabled, otherwise its missing tables
    are created.
    """
    app_settings = app_settings or settings

    if not app_settings.uses_memory_database and app_settings.auto_migrate:
        run_migrations(bind, app_settings.alembic_config)
        return

    create_tables(bind)
    logger.info("Database schema ready")


def dispose_engine(bind: Engine | None = None) -> None:
    """Close pooled connections; for in-memory SQLite this discards the data."""
    (bind or engine).dispose()
    logger.info("Database connections released")
