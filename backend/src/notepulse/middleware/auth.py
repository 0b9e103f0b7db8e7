"""Authentication gate for API routes.

Two ways in, same rules:

- ``AuthGate`` / ``get_current_user`` as a FastAPI dependency
- ``with_auth(handler)`` wrapping a plain ``(request, user) -> Response``
  endpoint

Any missing, malformed, expired or revoked token ends as the same 401
``{"error": "Authentication required"}``; the reason is only logged.
"""

import functools
import logging
from typing import Awaitable, Callable, Optional

from fastapi import Depends, Request
from starlette.responses import Response

from ..config import Settings, get_settings
from ..core.exceptions import (
    AuthenticationRequiredError,
    InvalidCredentialError,
    MissingCredentialError,
    authentication_required_response,
)
from ..core.redis_client import get_redis_client
from ..core.schemas.auth import AuthUser
from ..security import TokenVerifier, extract_token

logger = logging.getLogger(__name__)

AuthedHandler = Callable[[Request, AuthUser], Awaitable[Response]]


async def authenticate(request: Request, settings: Settings) -> AuthUser:
    """Extract and verify the request's token, or raise a credential error."""
    token = extract_token(request.headers, settings.cookie_name)
    if not token:
        raise MissingCredentialError("No token in Authorization header or cookie")
    if not settings.secret_key:
        raise InvalidCredentialError("Token verification is not configured")

    user = TokenVerifier.from_settings(settings).verify(token)

    if user.jti and await get_redis_client().is_token_revoked(user.jti):
        raise InvalidCredentialError("Token has been revoked")
    return user


async def resolve_identity(request: Request, settings: Settings) -> Optional[AuthUser]:
    """Identity for the request, or None when it cannot be established."""
    try:
        return await authenticate(request, settings)
    except (MissingCredentialError, InvalidCredentialError) as e:
        logger.info(
            "Authentication failed",
            extra={"reason": type(e).__name__, "path": request.url.path},
        )
        return None


class AuthGate:
    """FastAPI dependency returning the caller's ``AuthUser``."""

    async def __call__(
        self, request: Request, settings: Settings = Depends(get_settings)
    ) -> AuthUser:
        user = await resolve_identity(request, settings)
        if user is None:
            raise AuthenticationRequiredError()
        return user


# Dependency for getting the current user from the token
async def get_current_user(user: AuthUser = Depends(AuthGate())) -> AuthUser:
    """Get current authenticated user."""
    return user


def _settings_for(request: Request) -> Settings:
    # honour FastAPI dependency overrides so tests can swap settings
    overrides = getattr(request.app, "dependency_overrides", {})
    return overrides.get(get_settings, get_settings)()


def with_auth(handler: AuthedHandler) -> Callable[[Request], Awaitable[Response]]:
    """Wrap ``handler(request, user)`` into ``endpoint(request)``.

    The handler is not called at all when the request has no valid identity;
    otherwise its response is returned untouched.
    """

    @functools.wraps(handler)
    async def endpoint(request: Request) -> Response:
        user = await resolve_identity(request, _settings_for(request))
        if user is None:
            return authentication_required_response()
        return await handler(request, user)

    return endpoint
