"""Note repository for database operations.

Every statement filters by ``user_email``. Methods only flush; the caller
owns the transaction (see ``NoteService``).
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.mention import NoteMention
from ..models.note import Note
from ..models.tag import NoteTag
from ..models.types import utcnow
from .label_repository import MentionRepository, TagRepository

logger = logging.getLogger(__name__)


def local_day_bounds(now: datetime) -> tuple[datetime, datetime]:
    """[midnight, next midnight) of the calendar day ``now`` falls on, in its own tz."""
    if now.tzinfo is None:
        raise ValueError("local_day_bounds needs a timezone-aware datetime")
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    # add a calendar day in local wall time, then re-resolve the offset (DST)
    end = (start.replace(tzinfo=None) + timedelta(days=1)).replace(tzinfo=start.tzinfo)
    return start, end


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tags = TagRepository(session)
        self.mentions = MentionRepository(session)

    def _owned_notes(self, user_email: str):
        return (
            select(Note)
            .options(selectinload(Note.tags), selectinload(Note.mentions))
            .where(Note.user_email == user_email)
            # junction rows change behind the ORM's back; always reload
            .execution_options(populate_existing=True)
        )

    async def get_by_id_and_user(self, note_id: str, user_email: str) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = self._owned_notes(user_email).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_notes(self, user_email: str) -> List[Note]:
        """All of the user's notes, newest first, tags/mentions loaded."""
        stmt = self._owned_notes(user_email).order_by(desc(Note.created_at))
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def list_today(self, user_email: str, now: Optional[datetime] = None) -> List[Note]:
        """Notes created during the local calendar day of ``now``."""
        start, end = local_day_bounds(now or utcnow())
        stmt = (
            self._owned_notes(user_email)
            .where(and_(Note.created_at >= start, Note.created_at < end))
            .order_by(desc(Note.created_at))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def create_note(
        self,
        user_email: str,
        note_id: str,
        title: str,
        content: str,
        tags: Sequence[str] = (),
        mentions: Sequence[str] = (),
        now: Optional[datetime] = None,
    ) -> Note:
        """Insert a note and link its tags/mentions."""
        now = now or utcnow()
        note = Note(
            id=note_id,
            title=title,
            content=content,
            user_email=user_email,
            created_at=now,
            updated_at=now,
        )
        self.session.add(note)
        await self.session.flush()

        await self._link_labels(note_id, user_email, tags, mentions)
        return note

    async def update_note(
        self,
        user_email: str,
        note_id: str,
        title: str,
        content: str,
        tags: Sequence[str] = (),
        mentions: Sequence[str] = (),
        now: Optional[datetime] = None,
    ) -> bool:
        """Update title/content and replace all tag/mention links.

        Returns False (and touches nothing) when the user owns no such note.
        """
        stmt = (
            update(Note)
            .where(and_(Note.id == note_id, Note.user_email == user_email))
            .values(title=title, content=content, updated_at=now or utcnow())
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return False

        await self.session.execute(delete(NoteTag).where(NoteTag.note_id == note_id))
        await self.session.execute(delete(NoteMention).where(NoteMention.note_id == note_id))
        await self._link_labels(note_id, user_email, tags, mentions)
        return True

    async def delete_note(self, user_email: str, note_id: str) -> bool:
        """Delete note if owned by user; FK cascades drop the junction rows."""
        stmt = (
            delete(Note)
            .where(and_(Note.id == note_id, Note.user_email == user_email))
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def list_tag_names(self, user_email: str) -> List[str]:
        return await self.tags.list_names(user_email)

    async def list_mention_names(self, user_email: str) -> List[str]:
        return await self.mentions.list_names(user_email)

    async def _link_labels(
        self,
        note_id: str,
        user_email: str,
        tags: Sequence[str],
        mentions: Sequence[str],
    ) -> None:
        tag_rows = await self.tags.get_or_create_many(list(tags), user_email)
        if tag_rows:
            await self.session.execute(
                insert(NoteTag), [{"note_id": note_id, "tag_id": tag.id} for tag in tag_rows]
            )

        mention_rows = await self.mentions.get_or_create_many(list(mentions), user_email)
        if mention_rows:
            await self.session.execute(
                insert(NoteMention),
                [{"note_id": note_id, "mention_id": mention.id} for mention in mention_rows],
            )
