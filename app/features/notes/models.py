"""Note entity with validated title, text and tag mutation.

Tags are stored lowercase so tag lookups are case-insensitive. The creation
date is fixed when the note is constructed.
"""

from datetime import date

from app.core.exceptions import InvalidArgumentError


def normalize_tag(tag: str | None) -> str:
    """Validate a tag and return its lowercase form.

    Args:
        tag: Tag supplied by the caller.

    Returns:
        The lowercased tag.

    Raises:
        InvalidArgumentError: If tag is None or empty.
    """
    if not tag:
        raise InvalidArgumentError("Tag cannot be None or empty")
    return tag.lower()


class Note:
    """A titled text note with a set of lowercase tags.

    Two notes are equal when their ids are equal, whatever their content.
    """

    def __init__(self, note_id: int, title: str | None, text: str | None = None) -> None:
        """Create a note.

        Args:
            note_id: Unique identifier assigned by the repository.
            title: Note title (must not be None).
            text: Note text; None is stored as an empty string.

        Raises:
            InvalidArgumentError: If title is None.
        """
        if title is None:
            raise InvalidArgumentError("Title cannot be None")
        self._id = note_id
        self._title = title
        self._text = text if text is not None else ""
        self._creation_date = date.today()
        self._tags: set[str] = set()

    @property
    def id(self) -> int:
        return self._id

    @property
    def creation_date(self) -> date:
        return self._creation_date

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, title: str | None) -> None:
        if title is None:
            raise InvalidArgumentError("Title cannot be None")
        self._title = title

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, text: str | None) -> None:
        self._text = text if text is not None else ""

    @property
    def tags(self) -> frozenset[str]:
        """Read-only snapshot of the note's tags."""
        return frozenset(self._tags)

    def add_tag(self, tag: str | None) -> None:
        """Add a tag in lowercase form. Adding an existing tag is a no-op.

        Raises:
            InvalidArgumentError: If tag is None or empty.
        """
        self._tags.add(normalize_tag(tag))

    def remove_tag(self, tag: str | None) -> bool:
        """Remove a tag, ignoring case.

        Returns:
            True if the tag was present and removed, False otherwise.

        Raises:
            InvalidArgumentError: If tag is None or empty.
        """
        normalized = normalize_tag(tag)
        if normalized not in self._tags:
            return False
        self._tags.remove(normalized)
        return True

    def has_tag(self, tag: str) -> bool:
        """Return whether the note carries the tag, ignoring case."""
        return tag.lower() in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Note(id={self._id!r}, title={self._title!r})"

    def __str__(self) -> str:
        return (
            "\nNote{"
            f"\n   creation_date={self._creation_date.isoformat()}"
            f"\n   title='{self._title}'"
            f"\n   text='{self._text}'"
            "\n}"
        )
