"""JWT token utilities."""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from ..config import Settings
from ..core.exceptions import ExpiredCredentialError, InvalidCredentialError
from ..core.schemas.auth import AuthUser

logger = logging.getLogger(__name__)


def create_access_token(
    claims: Dict[str, Any], settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    """Sign identity claims into an access token with a JTI for revocation."""
    to_encode = claims.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode.update({"exp": expire, "jti": str(uuid.uuid4())})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


class TokenVerifier:
    """Checks signature and expiry, then pins the claims to ``AuthUser``."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("TokenVerifier needs a non-empty secret key")
        self.secret_key = secret_key
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenVerifier":
        return cls(settings.secret_key, settings.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """Return raw verified claims."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_aud": False},
            )
        except ExpiredSignatureError as e:
            raise ExpiredCredentialError("Token has expired") from e
        except JWTError as e:
            raise InvalidCredentialError(f"Token verification failed: {e}") from e

    def verify(self, token: str) -> AuthUser:
        """Verify ``token`` and return the identity it carries."""
        payload = self.decode(token)
        try:
            return AuthUser.model_validate(payload)
        except ValidationError as e:
            raise InvalidCredentialError("Token payload is missing identity claims") from e


def seconds_until_expiry(user: AuthUser) -> int:
    """Remaining lifetime of the token ``user`` came from (0 if unknown)."""
    if user.exp is None:
        return 0
    remaining = user.exp - int(datetime.now(timezone.utc).timestamp())
    return max(0, remaining)
