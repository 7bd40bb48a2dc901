"""Shared fixtures for web API tests."""

import os
from unittest.mock import patch

import pytest
import yaml
from fastapi.testclient import TestClient
from jose import jwt

from web.user_store import init_db


@pytest.fixture
def jwt_secret():
    return "test-moodtrack-secret"


def _make_auth_token(jwt_secret, user_id, email="u@test.com", name="U"):
    return jwt.encode(
        {"sub": user_id, "email": email, "name": name},
        jwt_secret,
        algorithm="HS256",
    )


@pytest.fixture
def auth_token(jwt_secret):
    return _make_auth_token(jwt_secret, "user-123", "test@example.com", "Test")


@pytest.fixture
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def auth_token_b(jwt_secret):
    """Second user token for isolation tests."""
    return _make_auth_token(jwt_secret, "user-456", "b@test.com", "UserB")


@pytest.fixture
def auth_headers_b(auth_token_b):
    return {"Authorization": f"Bearer {auth_token_b}"}


@pytest.fixture
def users_db(tmp_path):
    """Fresh users.db for each test."""
    db_path = tmp_path / "users.db"
    init_db(db_path)
    return db_path


@pytest.fixture
def mood_db(tmp_path):
    return tmp_path / "mood.db"


@pytest.fixture
def web_store(mood_db):
    """Direct access to the store the API writes to, for seeding backdated entries."""
    from mood.store import MoodStore

    return MoodStore(mood_db)


@pytest.fixture
def client(jwt_secret, tmp_path, users_db, mood_db):
    """Test client backed by temp databases."""
    from web.deps import get_config

    config_path = tmp_path / "web-config.yaml"
    config_path.write_text(yaml.safe_dump({"paths": {"db_path": str(mood_db)}}))

    env = {
        "MOODTRACK_JWT_SECRET": jwt_secret,
        "MOODTRACK_CONFIG": str(config_path),
    }

    patches = [
        patch.dict(os.environ, env),
        patch("web.deps.get_db_path", return_value=mood_db),
        # user_store uses test DB
        patch("web.user_store._DEFAULT_DB_PATH", users_db),
    ]

    for p in patches:
        p.start()
    get_config.cache_clear()

    from web.app import app

    yield TestClient(app)

    for p in reversed(patches):
        p.stop()
    get_config.cache_clear()
