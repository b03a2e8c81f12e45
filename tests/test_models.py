from datetime import date

import pytest

from app.core.exceptions import InvalidArgumentError
from app.features.notes.models import Note, normalize_tag


def test_construct_defaults():
    note = Note(1, "Title", None)
    assert note.id == 1
    assert note.title == "Title"
    assert note.text == ""
    assert note.tags == frozenset()
    assert note.creation_date == date.today()


def test_construct_rejects_missing_title():
    with pytest.raises(InvalidArgumentError):
        Note(1, None, "text")


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        Note(1, None)


def test_title_setter_validates():
    note = Note(1, "Old")
    with pytest.raises(InvalidArgumentError):
        note.title = None
    assert note.title == "Old"
    note.title = "New"
    assert note.title == "New"


def test_text_setter_normalizes_none():
    note = Note(1, "Title", "body")
    note.text = None
    assert note.text == ""


def test_add_tag_lowercases_and_dedupes():
    note = Note(1, "Title")
    note.add_tag("Java")
    note.add_tag("JAVA")
    note.add_tag("tdd")
    assert note.tags == {"java", "tdd"}


@pytest.mark.parametrize("tag", [None, ""])
def test_add_tag_rejects_empty(tag):
    note = Note(1, "Title")
    with pytest.raises(InvalidArgumentError):
        note.add_tag(tag)


def test_remove_tag_ignores_case():
    note = Note(1, "Title")
    note.add_tag("gradle")
    assert note.remove_tag("GRADLE") is True
    assert note.remove_tag("gradle") is False
    assert note.tags == frozenset()


@pytest.mark.parametrize("tag", [None, ""])
def test_remove_tag_rejects_empty(tag):
    note = Note(1, "Title")
    with pytest.raises(InvalidArgumentError):
        note.remove_tag(tag)


def test_tags_view_is_read_only():
    note = Note(1, "Title")
    note.add_tag("a")
    tags = note.tags
    with pytest.raises(AttributeError):
        tags.add("b")  # type: ignore[attr-defined]
    assert note.tags == {"a"}


def test_equality_by_id_only():
    first = Note(7, "One", "first")
    second = Note(7, "Two", "second")
    second.add_tag("x")
    assert first == second
    assert hash(first) == hash(second)
    assert first != Note(8, "One", "first")


def test_not_equal_to_none_or_other_types():
    note = Note(1, "Title")
    assert note != None  # noqa: E711
    assert note != 1
    assert note != "Title"


def test_str_contains_fields():
    note = Note(1, "Home", "I wanna go Home")
    rendered = str(note)
    assert "title='Home'" in rendered
    assert "text='I wanna go Home'" in rendered
    assert date.today().isoformat() in rendered


def test_normalize_tag():
    assert normalize_tag("MiXeD") == "mixed"
    with pytest.raises(InvalidArgumentError):
        normalize_tag("")
