# Mention models (@someone) - same shape as tags, separate namespace
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BaseModel
from .label import LabelMixin


class Mention(LabelMixin, BaseModel):
    """Person or handle mentioned in notes."""

    __tablename__ = "mentions"


class NoteMention(Base):
    """Links notes to mentions."""

    __tablename__ = "note_mentions"

    note_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True
    )
    mention_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("mentions.id", ondelete="CASCADE"), primary_key=True, index=True
    )
