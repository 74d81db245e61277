# chat_backend/services/pagination.py

from typing import List, Optional, Sequence
from chat_backend.models.message import Message
from chat_backend.utils.errors import CursorNotFoundError

MESSAGES_PAGE_SIZE = 20


def page_messages(
    messages: Sequence[Message],
    from_id: Optional[str] = None,
    page_size: int = MESSAGES_PAGE_SIZE,
) -> List[Message]:
    """
    Select one page out of ``messages``, which must already be in ascending
    creation order.

    Without a cursor the most recent ``page_size`` messages are returned.
    With a cursor, the messages strictly after ``from_id`` are returned,
    oldest first, at most ``page_size`` of them. An unknown cursor raises
    CursorNotFoundError.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    if not from_id:
        return list(messages[-page_size:])

    for index, message in enumerate(messages):
        if message.id == from_id:
            start = index + 1
            return list(messages[start:start + page_size])

    raise CursorNotFoundError(from_id)
