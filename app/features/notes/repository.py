"""In-memory note repository.

This module implements the business logic for:
- Creating notes with optional tags
- Reading notes by id or listing all of them
- Updating title and text
- Adding and removing tags
- Deleting notes
- Searching by text and by tags
"""

import threading
from collections.abc import Collection

from app.core.exceptions import InvalidArgumentError
from app.core.logging import get_logger
from app.features.notes.models import Note, normalize_tag

logger = get_logger(__name__)


def _require_tag_collection(tags: Collection[str]) -> None:
    # A bare string would otherwise be iterated character by character.
    if isinstance(tags, str):
        raise InvalidArgumentError(f"Tags must be a collection of strings, not a string: {tags!r}")


class NoteRepository:
    """Owns all notes, keyed by an increasing integer id.

    Unknown ids are never an error: lookups return None and mutations
    return False.
    """

    def __init__(self) -> None:
        """Initialize an empty repository whose first note gets id 1."""
        self._notes: dict[int, Note] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def add_note(
        self,
        title: str | None,
        text: str | None = None,
        tags: Collection[str] | None = None,
    ) -> Note:
        """Create and store a new note.

        Args:
            title: Note title (must not be None).
            text: Note text; None becomes an empty string.
            tags: Optional tags, stored lowercase.

        Returns:
            The created note with its assigned id.

        Raises:
            InvalidArgumentError: If title is None, tags is a bare string,
                or a tag is None or empty.
        """
        logger.info("notes.add_started", title=title)

        try:
            if tags is not None:
                _require_tag_collection(tags)
            with self._lock:
                note = Note(self._next_id, title, text)
                for tag in tags or ():
                    note.add_tag(tag)
                self._notes[note.id] = note
                self._next_id += 1
        except InvalidArgumentError as e:
            logger.error(
                "notes.add_failed",
                title=title,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        logger.info("notes.add_completed", note_id=note.id, tags=sorted(note.tags))
        return note

    def get_note_by_id(self, note_id: int) -> Note | None:
        """Return the note with the given id, or None if there is none."""
        with self._lock:
            return self._notes.get(note_id)

    def get_all_notes(self) -> list[Note]:
        """Return a snapshot of all notes in insertion order."""
        with self._lock:
            return list(self._notes.values())

    def update_note_text(self, note_id: int, new_title: str | None, new_text: str | None) -> bool:
        """Replace the title and text of an existing note.

        Args:
            note_id: Id of the note to update.
            new_title: New title (must not be None).
            new_text: New text; None becomes an empty string.

        Returns:
            True if the note exists and was updated, False otherwise.

        Raises:
            InvalidArgumentError: If new_title is None.
        """
        logger.info("notes.update_started", note_id=note_id)

        try:
            with self._lock:
                note = self._notes.get(note_id)
                if note is None:
                    logger.info("notes.update_not_found", note_id=note_id)
                    return False
                note.title = new_title
                note.text = new_text
        except InvalidArgumentError as e:
            logger.error(
                "notes.update_failed",
                note_id=note_id,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        logger.info("notes.update_completed", note_id=note_id)
        return True

    def add_tag_to_note(self, note_id: int, tag: str | None) -> bool:
        """Add a tag to an existing note.

        Returns:
            True if the tag was added, False if the note does not exist or
            already has the tag.

        Raises:
            InvalidArgumentError: If the note exists and tag is None or empty.
        """
        try:
            with self._lock:
                note = self._notes.get(note_id)
                if note is None:
                    return False
                normalized = normalize_tag(tag)
                if note.has_tag(normalized):
                    return False
                note.add_tag(normalized)
        except InvalidArgumentError as e:
            logger.error(
                "notes.add_tag_failed",
                note_id=note_id,
                tag=tag,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        logger.info("notes.tag_added", note_id=note_id, tag=normalized)
        return True

    def remove_tag_from_note(self, note_id: int, tag: str | None) -> bool:
        """Remove a tag from an existing note.

        Returns:
            True if the tag was removed, False if the note does not exist or
            does not have the tag.

        Raises:
            InvalidArgumentError: If the note exists and tag is None or empty.
        """
        try:
            with self._lock:
                note = self._notes.get(note_id)
                if note is None:
                    return False
                removed = note.remove_tag(tag)
        except InvalidArgumentError as e:
            logger.error(
                "notes.remove_tag_failed",
                note_id=note_id,
                tag=tag,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        if removed:
            logger.info("notes.tag_removed", note_id=note_id, tag=normalize_tag(tag))
        return removed

    def delete_note(self, note_id: int) -> bool:
        """Delete a note. Returns whether it existed."""
        with self._lock:
            note = self._notes.pop(note_id, None)

        if note is None:
            return False
        logger.info("notes.delete_completed", note_id=note_id)
        return True

    def find_notes_by_text(self, query: str | None) -> list[Note]:
        """Find notes whose text contains the query, ignoring case.

        Raises:
            InvalidArgumentError: If query is None.
        """
        if query is None:
            raise InvalidArgumentError("Query cannot be None")

        needle = query.lower()
        with self._lock:
            results = [note for note in self._notes.values() if needle in note.text.lower()]

        logger.info("notes.search_text_completed", query=query, results_count=len(results))
        return results

    def find_notes_by_tags(self, search_tags: Collection[str] | None) -> list[Note]:
        """Find notes carrying every one of the given tags, ignoring case.

        An empty tag collection matches only notes that have no tags at all.

        Args:
            search_tags: Tags that must all be present; None matches nothing.

        Returns:
            List of matching notes in insertion order.

        Raises:
            InvalidArgumentError: If search_tags is a bare string.
        """
        if search_tags is None:
            return []
        _require_tag_collection(search_tags)

        wanted = {tag.lower() for tag in search_tags}
        with self._lock:
            if not wanted:
                results = [note for note in self._notes.values() if not note.tags]
            else:
                results = [note for note in self._notes.values() if wanted <= note.tags]

        logger.info(
            "notes.search_tags_completed", tags=sorted(wanted), results_count=len(results)
        )
        return results

    def get_all_tags(self) -> set[str]:
        """Return every tag used by any note."""
        with self._lock:
            tags: set[str] = set()
            for note in self._notes.values():
                tags |= note.tags
            return tags
