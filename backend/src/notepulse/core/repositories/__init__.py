"""Repository layer for data access."""

from .label_repository import LabelRepository, MentionRepository, TagRepository
from .note_repository import NoteRepository

__all__ = [
    "LabelRepository",
    "TagRepository",
    "MentionRepository",
    "NoteRepository",
]
