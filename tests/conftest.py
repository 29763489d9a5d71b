"""
Shared fixtures for the DiscussHub test suite.

No real MongoDB is contacted: unit tests patch the Beanie documents out,
API tests patch the services out, and integration tests use mongomock-motor.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing the app.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tests.support.factories import make_user  # noqa: E402


@pytest.fixture
def alice():
    return make_user("alice")


@pytest.fixture
def bob():
    return make_user("bob")


@pytest.fixture
def carol():
    return make_user("carol")


@pytest.fixture
def app():
    from discusshub.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    # Not used as a context manager: the startup hook would try to reach MongoDB.
    return TestClient(app)


@pytest.fixture
def login_as(app):
    """Make every protected route see the given user as the authenticated caller."""
    from discusshub.security import get_current_user

    def _login(user):
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login
