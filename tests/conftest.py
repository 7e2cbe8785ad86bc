import os

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.base_class import Base
from app.main import create_app

TEST_DB_FILE = "test_study_buddy_hub.db"
TEST_SECRET = "test-secret"


@pytest.fixture(scope="session")
def test_settings():
    return Settings(
        DATABASE_URL=f"sqlite:///./{TEST_DB_FILE}",
        ACCESS_TOKEN_SECRET=TEST_SECRET,
        CORS_ORIGINS="http://localhost:5173",
    )


@pytest.fixture(scope="session")
def test_app(test_settings):
    app = create_app(test_settings)
    yield app
    app.state.engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def clean_db(test_app):
    """Fresh tables for each test."""
    engine = test_app.state.engine
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db(test_app):
    session = test_app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(test_app):
    # https so the Secure token cookie is sent back
    with TestClient(test_app, base_url="https://testserver") as c:
        yield c
