"""Auth API endpoints.

Tokens are issued by the sign-in flow; this service only inspects and
revokes them.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.requests import Request

from ..core.redis_client import get_redis_client
from ..core.schemas.auth import AuthUser, LogoutResponse
from ..middleware.auth import get_current_user, with_auth
from ..security import seconds_until_expiry

router = APIRouter(prefix="/auth", tags=["auth"])


async def me(request: Request, user: AuthUser) -> JSONResponse:
    """Identity claims of the caller."""
    return JSONResponse(user.model_dump(mode="json", by_alias=True, exclude_none=True))


# plain Starlette route: add_route does not apply the router prefix itself
router.add_route(f"{router.prefix}/me", with_auth(me), methods=["GET"], name="me")


@router.post("/logout", response_model=LogoutResponse)
async def logout(current_user: AuthUser = Depends(get_current_user)):
    """Revoke the current token until it expires."""
    if not current_user.jti:
        return LogoutResponse(success=False, message="Token cannot be revoked")

    revoked = await get_redis_client().revoke_token(
        current_user.jti, seconds_until_expiry(current_user)
    )
    if not revoked:
        return LogoutResponse(success=False, message="Token revocation unavailable")
    return LogoutResponse(success=True, message="Logged out")
