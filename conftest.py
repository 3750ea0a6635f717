import itertools
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from securechat.db.base import Base
from securechat.db.session import get_db
from securechat.main import app
from securechat.security.rate_limit import reset_rate_limits
from securechat import models  # noqa: F401

PASSWORD = "SecurePass123!"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

_counter = itertools.count(1)


@pytest.fixture(autouse=True)
def _fresh_state():
    Base.metadata.create_all(bind=engine)
    reset_rate_limits()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    def _get_test_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register and log in a fresh user; returns (user_id, auth headers, token)."""

    def _make(name: str = "user"):
        n = next(_counter)
        username = f"{name}_{n}"
        email = f"{username}@test.com"

        resp = client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": PASSWORD},
        )
        assert resp.status_code == 201, resp.text
        user_id = resp.json()["data"]["id"]

        resp = client.post("/auth/login", json={"email": email, "password": PASSWORD})
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["access_token"]
        return user_id, {"Authorization": f"Bearer {token}"}, token

    return _make
