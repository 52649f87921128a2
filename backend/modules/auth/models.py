"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from shared.models import AuthenticatedUser


# Profile claims read from the token. Issuers such as Auth0 only allow
# custom claims on access tokens under a namespace ("https://app/email"),
# so a namespaced key is accepted when the bare one is absent.
PROFILE_CLAIMS = ("email", "name", "nickname")


class TokenClaims(BaseModel):
    """
    Decoded bearer token payload from the identity provider.

    Only ``sub`` is required; profile claims are optional and are used
    as defaults when a profile is first created.
    """

    model_config = ConfigDict(extra="allow")

    sub: str = Field(..., min_length=1, description="Subject identifier")
    exp: Optional[int] = Field(None, description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")
    iss: Optional[str] = Field(None, description="Issuer")
    aud: Optional[Union[str, list[str]]] = Field(None, description="Audience")

    email: Optional[str] = Field(None, description="User's email")
    name: Optional[str] = Field(None, description="Full name")
    nickname: Optional[str] = Field(None, description="Nickname")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TokenClaims":
        """Build claims, resolving namespaced profile claims."""
        data = dict(payload)
        for claim in PROFILE_CLAIMS:
            if data.get(claim):
                continue
            for key, value in payload.items():
                if key.endswith("/" + claim) and isinstance(value, str):
                    data[claim] = value
                    break
        return cls(**data)

    def to_user(self) -> AuthenticatedUser:
        """Convert the claims to the caller identity."""
        return AuthenticatedUser(
            id=self.sub,
            email=self.email or None,
            name=self.name or None,
            nickname=self.nickname or None,
        )

