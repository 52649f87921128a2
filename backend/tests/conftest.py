"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import patch
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import AuthService, reset_auth_service
from modules.users.models import UserProfile
from shared.config import Settings, get_settings
from shared.database import reset_client_cache


# Test JWT settings (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_AUDIENCE = "https://api.orderdesk.test"
TEST_ISSUER = "https://orderdesk.test.auth0.com/"


def create_test_token(
    user_id: str = "auth0|test-user-123",
    email: str = "test@example.com",
    name: str = "Test User",
    nickname: str = "tester",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    audience: str = TEST_AUDIENCE,
    **claims,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: Subject identifier to include in the token
        email: Email to include in the token
        name: Full name claim
        nickname: Nickname claim
        expired: If True, creates an expired token
        secret: Signing secret
        audience: Audience claim
        **claims: Extra claims to merge in

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "name": name,
        "nickname": nickname,
        "aud": audience,
        "iss": TEST_ISSUER,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_test_settings(**overrides) -> Settings:
    """Settings for tests: HS256 auth, no database."""
    values = {
        "auth_jwt_secret": TEST_JWT_SECRET,
        "auth_audience": TEST_AUDIENCE,
        "auth_issuer": TEST_ISSUER,
        "supabase_url": "",
        "supabase_service_role_key": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services before and after each test."""
    get_settings.cache_clear()
    reset_auth_service()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_auth_service()
    reset_container()
    reset_client_cache()


@pytest.fixture
def test_settings() -> Settings:
    return make_test_settings()


@pytest.fixture
def auth_service(test_settings):
    """Real auth service verifying HS256 test tokens."""
    with patch("modules.auth.service.get_settings", return_value=test_settings):
        yield AuthService()


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def test_profile() -> UserProfile:
    """A stored profile matching the default test token."""
    now = datetime(2099, 1, 1, 9, 30, tzinfo=timezone.utc)
    return UserProfile(
        id="5d3c1c8e-0000-4000-8000-000000000001",
        subject_id="auth0|test-user-123",
        username="tester",
        name="Test User",
        email="test@example.com",
        contact_number=None,
        country=None,
        created_at=now,
        last_login=now,
    )


@pytest.fixture
def make_token():
    """Factory for test tokens with custom claims."""
    return create_test_token
