"""
Authentication service implementation.

Verifies bearer tokens issued by the external identity provider. In
production tokens are RS256-signed and the key is looked up in the issuer's
JWKS; for local development a shared HS256 secret can be configured instead.
"""

import asyncio
import logging
from typing import Any, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import TokenClaims
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The JWKS client caches signing keys, so after the first request a
    verification costs no network round trip until the issuer rotates keys.
    """

    def __init__(self, jwks_client: Optional[jwt.PyJWKClient] = None):
        self._settings = get_settings()
        self._jwks_client = jwks_client

    def _get_jwks_client(self) -> jwt.PyJWKClient:
        if self._jwks_client is None:
            url = self._settings.jwks_url
            if not url:
                raise AuthNotConfiguredError()
            self._jwks_client = jwt.PyJWKClient(url, cache_keys=True)
        return self._jwks_client

    def _resolve_key(self, token: str) -> tuple[Any, list[str]]:
        """Return the verification key and the algorithms it may be used with."""
        if self._settings.auth_jwt_secret:
            return self._settings.auth_jwt_secret, ["HS256"]
        signing_key = self._get_jwks_client().get_signing_key_from_jwt(token)
        return signing_key.key, list(self._settings.auth_algorithms)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the caller identity.

        Audience and issuer are checked when configured.
        """
        if not token:
            raise MissingTokenError()

        audience = self._settings.auth_audience or None
        issuer = self._settings.auth_issuer or None

        try:
            key, algorithms = await asyncio.to_thread(self._resolve_key, token)
            payload = jwt.decode(
                token,
                key,
                algorithms=algorithms,
                audience=audience,
                issuer=issuer,
                options={"verify_aud": audience is not None, "require": ["sub"]},
            )
            claims = TokenClaims.from_payload(payload)
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise ExpiredTokenError()
        except jwt.PyJWTError as e:
            logger.info(f"Rejected invalid token: {e}")
            raise InvalidTokenError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: malformed claims")

        return claims.to_user()


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
