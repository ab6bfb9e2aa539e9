"""
Pydantic models for visitor registrations.

``VisitorCreate`` describes the body of ``POST /register``.  Only the
nick is required and must not be blank.  The optional fields must be
strings when present.  Every field is kept exactly as sent, but must be
encodable as UTF-8 (lone surrogates are rejected).  Unknown fields are
ignored.

``VisitorPublic`` is what anonymous callers see, ``VisitorRead`` is
the full record returned to organizers.
"""

from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from party_api.app.core.errors import ValidationError


class VisitorCreate(BaseModel):
    """Schema for registering a new visitor."""

    model_config = ConfigDict(extra="ignore")

    nick: StrictStr = Field(..., description="Name shown on the public visitor list")
    group: Optional[StrictStr] = Field(None, description="Demogroup the visitor belongs to")
    email: Optional[StrictStr] = Field(None, description="Contact address, organizers only")
    extra: Optional[StrictStr] = Field(None, description="Free text for the organizers")

    @field_validator("nick", "group", "email", "extra")
    @classmethod
    def validate_utf8(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                v.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError("Text must be valid UTF-8") from exc
        return v

    @field_validator("nick")
    @classmethod
    def validate_nick(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Nick must not be empty")
        return v


class VisitorPublic(BaseModel):
    nick: str
    group: Optional[str] = None


class VisitorRead(BaseModel):
    id: int
    created_at: str
    ip: str
    nick: str
    group: Optional[str] = None
    email: Optional[str] = None
    extra: Optional[str] = None


def validate_registration(data: Any) -> VisitorCreate:
    """Check a decoded JSON body and return the registration.

    Raises
    ------
    ValidationError
        If ``data`` is not a JSON object, the nick is missing or blank,
        or any of the optional fields is not a string.
    """
    if not isinstance(data, dict):
        raise ValidationError("Registration body must be a JSON object")
    try:
        return VisitorCreate.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(str(exc)) from exc
