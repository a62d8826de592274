"""
Pytest configuration and fixtures for the blog associations tests
"""

import os

# Point the app at an in-memory SQLite database before anything imports the engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import text  # noqa: E402

from infrastructure.models import Base, PostORM, ProfileORM  # noqa: E402
from infrastructure.seeds import seed_database  # noqa: E402
from main import app  # noqa: E402
from utils.dependencies import SessionLocal, engine, get_db  # noqa: E402


@pytest.fixture(scope="function")
def db_session():
    """
    Fresh schema for every test: tables are created from the ORM metadata
    and dropped again afterwards.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def seeded_session(db_session):
    """Session over a database holding the sample author, posts, profile and tags."""
    seed_database(db_session)
    return db_session


@pytest.fixture(scope="function")
def orphan_rows(seeded_session):
    """
    A post and a profile whose author_id points at no author. Foreign keys are
    switched off only while the two rows are inserted and are on again before
    the test body runs.
    """
    seeded_session.commit()
    seeded_session.execute(text("PRAGMA foreign_keys=OFF"))
    try:
        post = PostORM(title="Orphaned post", author_id=999)
        profile = ProfileORM(username="orphan", author_id=999)
        seeded_session.add_all([post, profile])
        seeded_session.commit()
    finally:
        seeded_session.execute(text("PRAGMA foreign_keys=ON"))
        seeded_session.commit()

    assert seeded_session.execute(text("PRAGMA foreign_keys")).scalar() == 1
    return {"post_id": post.id, "profile_id": profile.id}


@pytest.fixture(scope="function")
def client(seeded_session):
    """TestClient whose requests share the seeded test session."""

    def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
