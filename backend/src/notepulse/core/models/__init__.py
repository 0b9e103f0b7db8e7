"""
Database models for NotePulse.

Every row is scoped to one owner by ``user_email``:
    - Note: title/content with timestamps
    - Tag / Mention: per-user labels, unique per (name, user_email)
    - NoteTag / NoteMention: junction rows, cascade-deleted with either parent
"""

from .base import Base, BaseModel
from .mention import Mention, NoteMention
from .note import Note
from .tag import NoteTag, Tag

__all__ = [
    "Base",
    "BaseModel",
    "Note",
    "Tag",
    "NoteTag",
    "Mention",
    "NoteMention",
]
