"""
User directory data models.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from shared.models import CamelModel
from shared.text import escape_markup

_PHONE_CHARS = re.compile(r"^\+?[\d\s\-()]+$")


class UserProfile(CamelModel):
    """
    Stored profile for a verified subject.

    Created implicitly on the first authenticated request; the caller
    never registers explicitly.
    """

    id: str = Field(..., description="Internal profile ID (UUID)")
    subject_id: str = Field(..., description="Identity-provider subject identifier")
    username: str = Field(..., description="Display username")
    name: str = Field(..., description="Full name")
    email: str = Field(default="", description="Email address")
    contact_number: Optional[str] = Field(None, description="Contact number")
    country: Optional[str] = Field(None, description="Country")
    created_at: datetime = Field(..., description="Profile creation time")
    last_login: datetime = Field(..., description="Last authenticated request")


class UpdateProfileRequest(CamelModel):
    """
    Profile edit. Omitted fields are left untouched; an empty value clears the field.
    """

    contact_number: Optional[str] = Field(None, description="Contact number")
    country: Optional[str] = Field(None, description="Country")

    @field_validator("contact_number")
    @classmethod
    def validate_contact_number(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if not re.search(r"\d", value) or not _PHONE_CHARS.match(value):
            raise ValueError("Invalid contact number")
        if not 7 <= len(value) <= 20:
            raise ValueError("Contact number must be 7-20 characters")
        return value

    @field_validator("country")
    @classmethod
    def validate_country(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if not 2 <= len(value) <= 50:
            raise ValueError("Country must be 2-50 characters")
        return escape_markup(value)

    def changes(self) -> dict[str, Optional[str]]:
        """Database columns for the fields present in the request."""
        return self.model_dump(exclude_unset=True, by_alias=False)
