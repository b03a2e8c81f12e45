"""FastAPI routes for note management.

This module provides HTTP endpoints for:
- Creating, reading, updating and deleting notes
- Adding and removing tags on a note
- Searching notes by text or tags
- Listing every tag in use
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel, Field

from app.core.logging import get_logger
from app.features.notes.models import Note
from app.features.notes.repository import NoteRepository

logger = get_logger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


class NoteCreateRequest(BaseModel):
    """Request model for creating a note.

    Attributes:
        title: Note title.
        text: Optional note text.
        tags: Optional tags; stored lowercase.
    """

    title: str = Field(..., description="Note title")
    text: str | None = Field(None, description="Note text, empty when omitted")
    tags: list[str] | None = Field(None, description="Tags to attach to the note")


class NoteUpdateRequest(BaseModel):
    """Request model for replacing a note's title and text."""

    title: str = Field(..., description="New note title")
    text: str | None = Field(None, description="New note text, empty when omitted")


class NoteResponse(BaseModel):
    """Response model for a single note."""

    id: int
    title: str
    text: str
    creation_date: date
    tags: list[str]

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        """Build the response body for a note, with tags sorted."""
        return cls(
            id=note.id,
            title=note.title,
            text=note.text,
            creation_date=note.creation_date,
            tags=sorted(note.tags),
        )


class TagChangeResponse(BaseModel):
    """Result of a tag add/remove request.

    Attributes:
        changed: False when the note already had (or lacked) the tag.
        tags: Tags on the note after the request.
    """

    changed: bool
    tags: list[str]


def get_repository(request: Request) -> NoteRepository:
    """Return the repository owned by the running application."""
    return request.app.state.repository


RepositoryDep = Annotated[NoteRepository, Depends(get_repository)]


def _require_note(repository: NoteRepository, note_id: int) -> Note:
    note = repository.get_note_by_id(note_id)
    if note is None:
        logger.warning("notes.not_found", note_id=note_id)
        raise HTTPException(status_code=404, detail=f"Note {note_id} not found")
    return note


def _log_failure(event: str, error: Exception, **context: object) -> None:
    logger.error(
        event,
        **context,
        error=str(error),
        error_type=type(error).__name__,
        exc_info=True,
    )


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(request: NoteCreateRequest, repository: RepositoryDep) -> NoteResponse:
    """Create a note.

    Raises:
        InvalidArgumentError: If a tag is empty (mapped to HTTP 400).
    """
    logger.info("api.create_note_started", title=request.title)

    try:
        note = repository.add_note(request.title, request.text, request.tags)
    except Exception as e:
        _log_failure("api.create_note_failed", e, title=request.title)
        raise

    logger.info("api.create_note_completed", note_id=note.id)
    return NoteResponse.from_note(note)


@router.get("", response_model=list[NoteResponse])
def list_notes(repository: RepositoryDep) -> list[NoteResponse]:
    """List all notes in the order they were created."""
    logger.info("api.list_notes_started")
    notes = repository.get_all_notes()
    logger.info("api.list_notes_completed", results_count=len(notes))
    return [NoteResponse.from_note(note) for note in notes]


@router.get("/tags", response_model=list[str])
def list_tags(repository: RepositoryDep) -> list[str]:
    """List every tag used by any note, sorted."""
    logger.info("api.list_tags_started")
    tags = sorted(repository.get_all_tags())
    logger.info("api.list_tags_completed", tags_count=len(tags))
    return tags


@router.get("/search", response_model=list[NoteResponse])
def search_by_text(
    repository: RepositoryDep,
    query: Annotated[str, Query(description="Case-insensitive text to look for")],
) -> list[NoteResponse]:
    """Find notes whose text contains the query."""
    logger.info("api.search_text_started", query=query)

    try:
        notes = repository.find_notes_by_text(query)
    except Exception as e:
        _log_failure("api.search_text_failed", e, query=query)
        raise

    logger.info("api.search_text_completed", results_count=len(notes))
    return [NoteResponse.from_note(note) for note in notes]


@router.get("/search/tags", response_model=list[NoteResponse])
def search_by_tags(
    repository: RepositoryDep,
    tag: Annotated[list[str], Query(description="Tags that must all be present")] = [],  # noqa: B006
) -> list[NoteResponse]:
    """Find notes carrying all given tags.

    Without any tag parameter, returns the notes that have no tags.
    """
    logger.info("api.search_tags_started", tags=tag)
    notes = repository.find_notes_by_tags(tag)
    logger.info("api.search_tags_completed", results_count=len(notes))
    return [NoteResponse.from_note(note) for note in notes]


@router.get("/{note_id}", response_model=NoteResponse)
def read_note(note_id: int, repository: RepositoryDep) -> NoteResponse:
    """Read a single note.

    Raises:
        HTTPException: 404 if the note does not exist.
    """
    logger.info("api.read_note_started", note_id=note_id)
    note = _require_note(repository, note_id)
    logger.info("api.read_note_completed", note_id=note_id)
    return NoteResponse.from_note(note)


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: int, request: NoteUpdateRequest, repository: RepositoryDep
) -> NoteResponse:
    """Replace a note's title and text.

    Raises:
        HTTPException: 404 if the note does not exist.
    """
    logger.info("api.update_note_started", note_id=note_id)

    try:
        updated = repository.update_note_text(note_id, request.title, request.text)
    except Exception as e:
        _log_failure("api.update_note_failed", e, note_id=note_id)
        raise

    if not updated:
        logger.warning("notes.not_found", note_id=note_id)
        raise HTTPException(status_code=404, detail=f"Note {note_id} not found")

    logger.info("api.update_note_completed", note_id=note_id)
    return NoteResponse.from_note(_require_note(repository, note_id))


@router.post("/{note_id}/tags/{tag}", response_model=TagChangeResponse)
def add_tag(note_id: int, tag: str, repository: RepositoryDep) -> TagChangeResponse:
    """Attach a tag to a note.

    Raises:
        HTTPException: 404 if the note does not exist.
    """
    logger.info("api.add_tag_started", note_id=note_id, tag=tag)
    note = _require_note(repository, note_id)

    try:
        changed = repository.add_tag_to_note(note_id, tag)
    except Exception as e:
        _log_failure("api.add_tag_failed", e, note_id=note_id, tag=tag)
        raise

    logger.info("api.add_tag_completed", note_id=note_id, changed=changed)
    return TagChangeResponse(changed=changed, tags=sorted(note.tags))


@router.delete("/{note_id}/tags/{tag}", response_model=TagChangeResponse)
def remove_tag(note_id: int, tag: str, repository: RepositoryDep) -> TagChangeResponse:
    """Detach a tag from a note.

    Raises:
        HTTPException: 404 if the note does not exist.
    """
    logger.info("api.remove_tag_started", note_id=note_id, tag=tag)
    note = _require_note(repository, note_id)

    try:
        changed = repository.remove_tag_from_note(note_id, tag)
    except Exception as e:
        _log_failure("api.remove_tag_failed", e, note_id=note_id, tag=tag)
        raise

    logger.info("api.remove_tag_completed", note_id=note_id, changed=changed)
    return TagChangeResponse(changed=changed, tags=sorted(note.tags))


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(note_id: int, repository: RepositoryDep) -> Response:
    """Delete a note (DESTRUCTIVE operation).

    Raises:
        HTTPException: 404 if the note does not exist.
    """
    logger.info("api.delete_note_started", note_id=note_id)
    if not repository.delete_note(note_id):
        logger.warning("notes.not_found", note_id=note_id)
        raise HTTPException(status_code=404, detail=f"Note {note_id} not found")
    logger.info("api.delete_note_completed", note_id=note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
