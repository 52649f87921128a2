import pytest
from unittest.mock import patch, MagicMock
import jwt
from datetime import datetime, timedelta, timezone
from cryptography.hazmat.primitives.asymmetric import rsa

from modules.auth.service import AuthService, get_auth_service, reset_auth_service
from modules.auth.exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)
from shared.config import Settings
from shared.exceptions import AuthenticationError, OrderDeskError


SECRET = "test-secret"
AUDIENCE = "https://api.orderdesk.test"
ISSUER = "https://orderdesk.test.auth0.com/"


def make_payload(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": "auth0|user-123",
        "email": "test@example.com",
        "name": "Test User",
        "nickname": "tester",
        "exp": now + timedelta(hours=1),
        "iat": now,
        "aud": AUDIENCE,
        "iss": ISSUER,
    }
    payload.update(overrides)
    return payload


def make_service(jwks_client=None, **settings) -> AuthService:
    values = {"auth_jwt_secret": SECRET, "auth_audience": AUDIENCE, "auth_issuer": ISSUER}
    values.update(settings)
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value = Settings(_env_file=None, **values)
        return AuthService(jwks_client=jwks_client)


class TestAuthService:
    @pytest.fixture
    def service(self):
        """Create auth service configured for HS256."""
        return make_service()

    @pytest.fixture
    def valid_token(self):
        """Create a valid JWT token."""
        return jwt.encode(make_payload(), SECRET, algorithm="HS256")

    @pytest.fixture
    def expired_token(self):
        """Create an expired JWT token."""
        payload = make_payload(
            exp=datetime.now(timezone.utc) - timedelta(hours=1),
            iat=datetime.now(timezone.utc) - timedelta(hours=2),
        )
        return jwt.encode(payload, SECRET, algorithm="HS256")

    @pytest.mark.asyncio
    async def test_validate_valid_token(self, service, valid_token):
        """Should validate a valid token and return user."""
        user = await service.validate_token(valid_token)
        assert user.id == "auth0|user-123"
        assert user.email == "test@example.com"
        assert user.name == "Test User"
        assert user.nickname == "tester"

    @pytest.mark.asyncio
    async def test_validate_expired_token(self, service, expired_token):
        """Should raise ExpiredTokenError for expired token."""
        with pytest.raises(ExpiredTokenError):
            await service.validate_token(expired_token)

    @pytest.mark.asyncio
    async def test_validate_invalid_token(self, service):
        """Should raise InvalidTokenError for malformed token."""
        with pytest.raises(InvalidTokenError):
            await service.validate_token("not-a-valid-token")

    @pytest.mark.asyncio
    async def test_validate_missing_token(self, service):
        """Should raise MissingTokenError for empty token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token("")

    @pytest.mark.asyncio
    async def test_validate_none_token(self, service):
        """Should raise MissingTokenError for None token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token(None)

    @pytest.mark.asyncio
    async def test_validate_wrong_secret(self, service):
        """Should raise InvalidTokenError for token signed with wrong secret."""
        token = jwt.encode(make_payload(), "wrong-secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_wrong_audience(self, service):
        """Should raise InvalidTokenError for token with wrong audience."""
        token = jwt.encode(make_payload(aud="wrong-audience"), SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_wrong_issuer(self, service):
        """Should raise InvalidTokenError for token from another issuer."""
        token = jwt.encode(make_payload(iss="https://evil.example/"), SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_missing_subject(self, service):
        """Should raise InvalidTokenError when sub is absent."""
        payload = make_payload()
        del payload["sub"]
        token = jwt.encode(payload, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_audience_not_checked_when_unset(self):
        """Without a configured audience any aud claim is accepted."""
        service = make_service(auth_audience="")
        token = jwt.encode(make_payload(aud="anything"), SECRET, algorithm="HS256")
        user = await service.validate_token(token)
        assert user.id == "auth0|user-123"

    @pytest.mark.asyncio
    async def test_namespaced_claims(self, service):
        """Namespaced profile claims should be used when plain ones are absent."""
        payload = make_payload()
        del payload["email"]
        payload["https://orderdesk.test/email"] = "ns@example.com"
        token = jwt.encode(payload, SECRET, algorithm="HS256")
        user = await service.validate_token(token)
        assert user.email == "ns@example.com"


class TestJWKSVerification:
    @pytest.fixture
    def private_key(self):
        return rsa.generate_private_key(public_exponent=65537, key_size=2048)

    @pytest.fixture
    def jwks_client(self, private_key):
        client = MagicMock()
        client.get_signing_key_from_jwt.return_value.key = private_key.public_key()
        return client

    @pytest.mark.asyncio
    async def test_validate_rs256_token(self, private_key, jwks_client):
        """Should verify RS256 tokens against the issuer's signing key."""
        service = make_service(jwks_client=jwks_client, auth_jwt_secret="")
        token = jwt.encode(make_payload(), private_key, algorithm="RS256", headers={"kid": "key-1"})

        user = await service.validate_token(token)

        assert user.id == "auth0|user-123"
        jwks_client.get_signing_key_from_jwt.assert_called_once_with(token)

    @pytest.mark.asyncio
    async def test_rejects_hs256_when_rs256_expected(self, jwks_client):
        """A symmetric token should not pass RS256 verification."""
        service = make_service(jwks_client=jwks_client, auth_jwt_secret="")
        token = jwt.encode(make_payload(), SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_not_configured(self):
        """Without a secret or issuer there is nothing to verify against."""
        service = make_service(auth_jwt_secret="", auth_issuer="", auth_jwks_url="")
        token = jwt.encode(make_payload(), SECRET, algorithm="HS256")
        with pytest.raises(AuthNotConfiguredError) as exc_info:
            await service.validate_token(token)
        assert not isinstance(exc_info.value, AuthenticationError)
        assert isinstance(exc_info.value, OrderDeskError)


class TestAuthServiceSingleton:
    def test_get_auth_service_is_cached(self):
        reset_auth_service()
        assert get_auth_service() is get_auth_service()

    def test_reset_auth_service(self):
        first = get_auth_service()
        reset_auth_service()
        assert get_auth_service() is not first
