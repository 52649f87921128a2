"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthenticatedUser(BaseModel):
    """
    Represents a verified caller.

    This model is populated from the identity provider's token claims and
    made available to route handlers via dependency injection. It carries
    only what the token says; the stored profile lives in the users module.
    """

    id: str = Field(..., description="Subject identifier from the identity provider")
    email: Optional[str] = Field(None, description="Email claim, if present")
    name: Optional[str] = Field(None, description="Full name claim, if present")
    nickname: Optional[str] = Field(None, description="Nickname claim, if present")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from the token
    }


class CamelModel(BaseModel):
    """
    Base for models exchanged with the client.

    Fields are snake_case in Python and camelCase on the wire; both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
