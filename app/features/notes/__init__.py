"""Notes feature: note entity, repository and HTTP routes."""

from app.features.notes.models import Note
from app.features.notes.repository import NoteRepository
from app.features.notes.routes import router

__all__ = ["Note", "NoteRepository", "router"]
