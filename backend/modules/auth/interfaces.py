"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the identity provider.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity verification.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the caller identity.

        Args:
            token: Access token issued by the identity provider

        Returns:
            AuthenticatedUser with the subject identifier and profile claims

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...
