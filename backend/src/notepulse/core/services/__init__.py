"""
Service layer: transactions and response shaping on top of the repositories.
"""

from .health_service import HealthService
from .interfaces import IHealthService, INoteService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "INoteService",
    "IHealthService",
    # Implementations
    "NoteService",
    "HealthService",
]
