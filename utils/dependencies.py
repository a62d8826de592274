"""Database and service dependencies for the Blog Associations service.

This module provides dependency injection functions for FastAPI,
including database session management and domain service factories.

Functions:
    - create_db_engine: Engine factory that enforces foreign keys on SQLite
    - get_db: Database session factory with automatic cleanup
    - get_author_service, get_post_service, get_profile_service, get_tag_service:
      Domain services wired to their SQLAlchemy repositories

Architecture:
    These utilities are shared across all layers and provide clean dependency
    injection for database access and domain operations.
"""

import logging
from typing import Generator

from domain.services.author_service import AuthorService
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from domain.services.tag_service import TagService
from infrastructure.repositories.sqlalchemy_author_repository import (
    SqlAlchemyAuthorRepository,
)
from infrastructure.repositories.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from infrastructure.repositories.sqlalchemy_post_tag_repository import (
    SqlAlchemyPostTagRepository,
)
from infrastructure.repositories.sqlalchemy_profile_repository import (
    SqlAlchemyProfileRepository,
)
from infrastructure.repositories.sqlalchemy_tag_repository import (
    SqlAlchemyTagRepository,
)
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL, LOG_LEVEL, SQL_ECHO

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the given URL.

    SQLite does not enforce foreign keys unless asked to, so every new SQLite
    connection gets ``PRAGMA foreign_keys=ON``. In-memory SQLite databases
    share one connection so that all sessions see the same schema.

    Args:
        database_url (str): SQLAlchemy database URL.
        echo (bool): Log every emitted SQL statement.

    Returns:
        Engine: Configured engine.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    engine_kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

    sqlite_engine = create_engine(database_url, echo=echo, **engine_kwargs)

    @event.listens_for(sqlite_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


# Database setup
engine = create_db_engine(DATABASE_URL, echo=SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Get database session with automatic cleanup.

    Yields:
        Session: SQLAlchemy database session that automatically closes after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_author_service() -> AuthorService:
    """Create the author service with its repository dependencies.

    The session is injected per-request in each endpoint method.

    Returns:
        AuthorService: Configured domain service ready for use.
    """
    return AuthorService(
        SqlAlchemyAuthorRepository(),
        SqlAlchemyPostRepository(),
        SqlAlchemyProfileRepository(),
    )


def get_post_service() -> PostService:
    """Create the post service with its repository dependencies.

    Returns:
        PostService: Configured domain service ready for use.
    """
    return PostService(
        SqlAlchemyPostRepository(),
        SqlAlchemyAuthorRepository(),
        SqlAlchemyTagRepository(),
        SqlAlchemyPostTagRepository(),
    )


def get_profile_service() -> ProfileService:
    """Create the profile service with its repository dependencies.

    Returns:
        ProfileService: Configured domain service ready for use.
    """
    return ProfileService(SqlAlchemyProfileRepository(), SqlAlchemyAuthorRepository())


def get_tag_service() -> TagService:
    """Create and configure the tag service with repository dependencies.

    Returns:
        TagService: Configured domain service ready for use.
    """
    # Infrastructure layer: SQLAlchemy repositories (no session stored)
    tag_repository = SqlAlchemyTagRepository()
    post_repository = SqlAlchemyPostRepository()

    # Domain layer: Domain service with business logic
    return TagService(tag_repository, post_repository)
