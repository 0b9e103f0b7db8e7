"""Error taxonomy and FastAPI exception handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED = "Authentication required"


class NotePulseError(Exception):
    """Base class for errors the API knows how to render."""

    status_code: int = 500

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message


class MissingCredentialError(NotePulseError):
    """No token in the Authorization header or auth cookie."""

    status_code = 401


class InvalidCredentialError(NotePulseError):
    """Token present but signature, claims or expiry did not check out."""

    status_code = 401


class ExpiredCredentialError(InvalidCredentialError):
    """Token signature is fine but ``exp`` has passed."""


class AuthenticationRequiredError(NotePulseError):
    """Raised by the auth gate; always rendered the same way."""

    status_code = 401

    def __init__(self):
        super().__init__(AUTHENTICATION_REQUIRED)


class NoteValidationError(NotePulseError):
    """Input failed a shape or non-empty check."""

    status_code = 422


def authentication_required_response() -> JSONResponse:
    """The one 401 body clients ever see."""
    return JSONResponse({"error": AUTHENTICATION_REQUIRED}, status_code=401)


def register_exception_handlers(app: FastAPI) -> None:
    """Map NotePulseError subclasses to JSON responses."""

    @app.exception_handler(AuthenticationRequiredError)
    async def authentication_required_handler(
        request: Request, exc: AuthenticationRequiredError
    ) -> JSONResponse:
        return authentication_required_response()

    @app.exception_handler(NotePulseError)
    async def notepulse_error_handler(request: Request, exc: NotePulseError) -> JSONResponse:
        if exc.status_code == 401:
            # never leak which credential check failed
            return authentication_required_response()
        logger.warning(
            f"{type(exc).__name__}: {exc.message}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)
