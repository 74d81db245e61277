# tests/test_pagination.py

import pytest
from chat_backend.models.message import Message
from chat_backend.services.pagination import MESSAGES_PAGE_SIZE, page_messages
from chat_backend.utils.errors import CursorNotFoundError


def make_messages(count):
    return [Message(id=str(i), username=f"u{i}", text=f"t{i}") for i in range(1, count + 1)]

def ids(messages):
    return [m.id for m in messages]


def test_page_size_is_twenty():
    assert MESSAGES_PAGE_SIZE == 20

def test_without_cursor_returns_everything_when_short():
    assert ids(page_messages(make_messages(2))) == ["1", "2"]

def test_without_cursor_returns_most_recent_page_in_order():
    page = page_messages(make_messages(45))
    assert ids(page) == [str(i) for i in range(26, 46)]

def test_empty_cursor_is_treated_as_absent():
    assert ids(page_messages(make_messages(3), "")) == ["1", "2", "3"]

def test_cursor_excludes_the_cursor_message():
    assert ids(page_messages(make_messages(2), "1")) == ["2"]

def test_cursor_returns_oldest_messages_after_it():
    page = page_messages(make_messages(50), "5")
    assert ids(page) == [str(i) for i in range(6, 26)]

def test_cursor_on_last_message_returns_empty_page():
    assert page_messages(make_messages(3), "3") == []

def test_unknown_cursor_raises():
    with pytest.raises(CursorNotFoundError) as excinfo:
        page_messages(make_messages(3), "AAA")
    assert excinfo.value.status_code == 404
    assert excinfo.value.from_id == "AAA"

def test_no_messages():
    assert page_messages([]) == []
    with pytest.raises(CursorNotFoundError):
        page_messages([], "1")

def test_custom_page_size():
    assert ids(page_messages(make_messages(10), page_size=3)) == ["8", "9", "10"]
    assert ids(page_messages(make_messages(10), "2", page_size=3)) == ["3", "4", "5"]

@pytest.mark.parametrize("page_size", [0, -1])
def test_non_positive_page_size_is_rejected(page_size):
    with pytest.raises(ValueError):
        page_messages(make_messages(3), page_size=page_size)

def test_input_is_not_modified():
    messages = make_messages(25)
    page_messages(messages, "3")
    assert len(messages) == 25
