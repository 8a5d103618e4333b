"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from blog_api.config import get_settings
from blog_api.database import Base, get_db
from blog_api.main import app
from tests.queries import SIGNIN, SIGNUP

SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class SignedInUser(dict):
    """Dict of the signed-in user's fields that also carries the token."""

    def __init__(self, *args, token: str, password: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.token = token
        self.password = password


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def graphql(client):
    """Return a function that posts a GraphQL operation and returns the JSON body."""

    def execute(query: str, **variables) -> dict:
        response = client.post("/graphql", json={"query": query, "variables": variables})
        assert response.status_code == 200
        return response.json()

    return execute


@pytest.fixture
def signed_in(graphql):
    """Sign up and sign in a user, returning its fields and token."""
    result = graphql(SIGNUP, name="Test User", email="test@example.com", password="testpass123")
    assert "errors" not in result

    result = graphql(SIGNIN, email="test@example.com", password="testpass123")
    payload = result["data"]["signinUser"]
    assert payload["token"] is not None

    return SignedInUser(payload["user"], token=payload["token"], password="testpass123")


@pytest.fixture
def write_gate(monkeypatch):
    """Require a valid token for content mutations during the test."""
    monkeypatch.setattr(get_settings(), "require_token_for_writes", True)
