# Tag models for organizing notes
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BaseModel
from .label import LabelMixin


class Tag(LabelMixin, BaseModel):
    """Tag for categorizing notes. Orphaned tags are kept for autocompletion."""

    __tablename__ = "tags"


class NoteTag(Base):
    """Links notes to tags."""

    __tablename__ = "note_tags"

    note_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True
    )
