"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import AuthUser, LogoutResponse
from .common import ErrorResponse, HealthCheckResponse
from .notes import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    NoteUpdateResponse,
    TodayNoteResponse,
)

__all__ = [
    # Auth schemas
    "AuthUser",
    "LogoutResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteUpdateResponse",
    "TodayNoteResponse",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]
