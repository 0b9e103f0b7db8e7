"""Note service implementation."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NoteValidationError
from ..models.note import Note
from ..models.types import utcnow
from ..repositories.note_repository import NoteRepository
from ..schemas.auth import AuthUser
from ..schemas.notes import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    NoteUpdateResponse,
    TodayNoteResponse,
)
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation.

    Each mutation runs in one transaction: either the note row and all of
    its junction rows change together, or nothing does.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def list_notes(self, user: AuthUser) -> List[NoteResponse]:
        notes = await self.note_repo.list_notes(user.email)
        return [self._note_to_response(note) for note in notes]

    async def list_today(
        self, user: AuthUser, now: Optional[datetime] = None
    ) -> List[TodayNoteResponse]:
        notes = await self.note_repo.list_today(user.email, now)
        return [self._note_to_response(note, TodayNoteResponse) for note in notes]

    async def create_note(self, user: AuthUser, request: NoteCreate) -> NoteResponse:
        """Create note; the response echoes the tag/mention lists as sent."""
        self._require_title(request.title)
        tags = request.tags or []
        mentions = request.mentions or []

        try:
            note = await self.note_repo.create_note(
                user.email,
                request.id,
                request.title,
                request.content,
                tags=tags,
                mentions=mentions,
                now=utcnow(),
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Note created",
            extra={"note_id": note.id, "tag_count": len(tags), "mention_count": len(mentions)},
        )
        return self._note_to_response(note, tags=tags, mentions=mentions)

    async def update_note(
        self, user: AuthUser, note_id: str, request: NoteUpdate
    ) -> NoteUpdateResponse:
        """Update note. Unknown or foreign ids are a silent no-op."""
        self._require_title(request.title)
        tags = request.tags or []
        mentions = request.mentions or []

        try:
            updated = await self.note_repo.update_note(
                user.email,
                note_id,
                request.title,
                request.content,
                tags=tags,
                mentions=mentions,
                now=utcnow(),
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if updated:
            logger.info("Note updated", extra={"note_id": note_id})
        else:
            logger.warning(f"Update skipped: note {note_id} not found for user")

        return NoteUpdateResponse(
            id=note_id,
            title=request.title,
            content=request.content,
            tags=tags,
            mentions=mentions,
        )

    async def delete_note(self, user: AuthUser, note_id: str) -> bool:
        try:
            deleted = await self.note_repo.delete_note(user.email, note_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if deleted:
            logger.info("Note deleted", extra={"note_id": note_id})
        else:
            logger.warning(f"Delete skipped: note {note_id} not found for user")
        return deleted

    async def list_tags(self, user: AuthUser) -> List[str]:
        return await self.note_repo.list_tag_names(user.email)

    async def list_mentions(self, user: AuthUser) -> List[str]:
        return await self.note_repo.list_mention_names(user.email)

    @staticmethod
    def _require_title(title: str) -> None:
        if not title:
            raise NoteValidationError("Title is required")

    @staticmethod
    def _note_to_response(
        note: Note,
        response_cls: type[NoteResponse] = NoteResponse,
        tags: Optional[List[str]] = None,
        mentions: Optional[List[str]] = None,
    ) -> NoteResponse:
        """Convert note model to response; explicit lists skip the relationships."""
        return response_cls(
            id=note.id,
            title=note.title,
            content=note.content,
            user_email=note.user_email,
            created_at=note.created_at,
            updated_at=note.updated_at,
            tags=note.tag_names if tags is None else list(tags),
            mentions=note.mention_names if mentions is None else list(mentions),
        )
