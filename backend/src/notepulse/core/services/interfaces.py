"""
Service interfaces for NotePulse.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..schemas.auth import AuthUser
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    NoteUpdateResponse,
    TodayNoteResponse,
)


class INoteService(ABC):
    """Note operations for the authenticated user."""

    @abstractmethod
    async def list_notes(self, user: AuthUser) -> List[NoteResponse]:
        """All notes, newest first."""

    @abstractmethod
    async def list_today(
        self, user: AuthUser, now: Optional[datetime] = None
    ) -> List[TodayNoteResponse]:
        """Notes created during the caller's local day."""

    @abstractmethod
    async def create_note(self, user: AuthUser, request: NoteCreate) -> NoteResponse:
        """Create note with tags/mentions."""

    @abstractmethod
    async def update_note(
        self, user: AuthUser, note_id: str, request: NoteUpdate
    ) -> NoteUpdateResponse:
        """Update note, replacing tags/mentions."""

    @abstractmethod
    async def delete_note(self, user: AuthUser, note_id: str) -> bool:
        """Delete note."""

    @abstractmethod
    async def list_tags(self, user: AuthUser) -> List[str]:
        """Tag names for autocompletion."""

    @abstractmethod
    async def list_mentions(self, user: AuthUser) -> List[str]:
        """Mention names for autocompletion."""


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall system health status."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check database connectivity."""

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connectivity."""
