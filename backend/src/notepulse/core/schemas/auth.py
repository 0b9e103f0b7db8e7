"""
Authentication schemas.

The identity payload is whatever the sign-in flow put in the JWT. We pin it
to a fixed record: ``id``, ``email`` and ``name`` are required, everything
else is optional and unknown claims are dropped.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """Identity decoded from a verified access token."""

    id: str = Field(min_length=1, description="Stable user id from the identity provider")
    email: str = Field(min_length=1, description="Owner key for notes, tags and mentions")
    name: str = Field(description="Display name")
    picture: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email_verified: Optional[bool] = None
    provider: Optional[str] = None
    exp: Optional[int] = Field(default=None, description="Expiry, seconds since epoch")
    cookie_expiration: Optional[int] = Field(
        default=None,
        alias="cookieExpiration",
        description="Web cookie expiry tracked by the client",
    )
    jti: Optional[str] = Field(default=None, description="Token id, used for revocation")

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "id": "108234567890",
                "email": "ada@example.com",
                "name": "Ada Lovelace",
                "picture": "https://example.com/ada.png",
                "email_verified": True,
                "provider": "google",
                "exp": 1760000000,
            }
        },
    )


class LogoutResponse(BaseModel):
    """Result of revoking the current token."""

    success: bool
    message: str
