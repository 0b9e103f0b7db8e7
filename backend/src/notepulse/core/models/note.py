# Note model for user content
from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import UTCDateTime, utcnow

if TYPE_CHECKING:
    from .mention import Mention
    from .tag import Tag


class Note(BaseModel):
    """Note owned by exactly one user (by email)."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    user_email: Mapped[str] = mapped_column(String(320), nullable=False)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)

    # junction rows are written directly; these are read-side views
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary="note_tags",
        viewonly=True,
        lazy="selectin",
        order_by="Tag.name",
        doc="Tags associated with this note",
    )

    mentions: Mapped[List["Mention"]] = relationship(
        "Mention",
        secondary="note_mentions",
        viewonly=True,
        lazy="selectin",
        order_by="Mention.name",
        doc="Mentions associated with this note",
    )

    __table_args__ = (
        Index("idx_notes_owner_created", "user_email", "created_at"),
        CheckConstraint("length(title) >= 1", name="ck_notes_title_not_empty"),
    )

    def __repr__(self) -> str:
        # keep reprs short in logs
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_email={self.user_email})>"

    @property
    def tag_names(self) -> List[str]:
        """Tag names; assumes the tags relationship is loaded."""
        return [tag.name for tag in self.tags]

    @property
    def mention_names(self) -> List[str]:
        """Mention names; assumes the mentions relationship is loaded."""
        return [mention.name for mention in self.mentions]

    def is_owned_by(self, user_email: str) -> bool:
        return self.user_email == user_email
