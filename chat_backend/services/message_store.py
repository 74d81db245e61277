# chat_backend/services/message_store.py

import itertools
from typing import Dict, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from chat_backend.core.clock import Clock, utc_now
from chat_backend.core.logger import logger
from chat_backend.models.message import Message, MessageRequest, StoredMessage
from chat_backend.utils.errors import StoreUnavailableError

# Creation order, with the document key breaking timestamp ties
MESSAGE_SORT = [("timestamp", ASCENDING), ("_id", ASCENDING)]


class MessageStore:
    """
    Persistence boundary for chat messages.

    Implementations assign the message id and creation timestamp, and list
    messages in ascending creation order (ties broken by id).
    """

    async def create(self, request: MessageRequest, image_url: Optional[str] = None) -> Message:
        raise NotImplementedError

    async def list_ordered(self) -> List[Message]:
        raise NotImplementedError


def _new_record(request: MessageRequest, image_url: Optional[str], clock: Clock) -> StoredMessage:
    return StoredMessage(
        username=request.username,
        timestamp=clock(),
        text=request.text,
        image_url=image_url or request.image_url,
    )


class MongoMessageStore(MessageStore):
    """One document per message; ``_id`` is the message id as a string."""

    def __init__(self, collection: AsyncIOMotorCollection, clock: Clock = utc_now):
        self._collection = collection
        self._clock = clock

    async def create(self, request: MessageRequest, image_url: Optional[str] = None) -> Message:
        record = _new_record(request, image_url, self._clock)
        message_id = str(ObjectId())
        try:
            await self._collection.insert_one({"_id": message_id, **record.to_document()})
        except PyMongoError as e:
            logger.error(f"Failed to store message for {request.username}: {e}")
            raise StoreUnavailableError("Message store unavailable") from e
        return record.to_message(message_id)

    async def list_ordered(self) -> List[Message]:
        try:
            documents = await self._collection.find().sort(MESSAGE_SORT).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Failed to list messages: {e}")
            raise StoreUnavailableError("Message store unavailable") from e
        return [
            StoredMessage.from_document(document).to_message(str(document["_id"]))
            for document in documents
        ]


def _id_sort_key(message_id: str):
    # Decimal ids compare numerically ("2" < "10") and ahead of any other id
    if message_id.isdigit():
        return (0, int(message_id), "")
    return (1, 0, message_id)


class InMemoryMessageStore(MessageStore):
    """Process-local store; ids are sequential decimal strings."""

    def __init__(self, clock: Clock = utc_now):
        self._clock = clock
        self._records: Dict[str, StoredMessage] = {}
        self._ids = itertools.count(1)

    def insert(self, message_id: str, record: StoredMessage) -> None:
        """Seed a record under an explicit id."""
        if message_id in self._records:
            raise KeyError(f"Message '{message_id}' already exists")
        self._records[message_id] = record

    def _next_id(self) -> str:
        message_id = str(next(self._ids))
        while message_id in self._records:
            message_id = str(next(self._ids))
        return message_id

    async def create(self, request: MessageRequest, image_url: Optional[str] = None) -> Message:
        record = _new_record(request, image_url, self._clock)
        message_id = self._next_id()
        self._records[message_id] = record
        return record.to_message(message_id)

    async def list_ordered(self) -> List[Message]:
        ordered = sorted(
            self._records.items(),
            key=lambda item: (item[1].timestamp, _id_sort_key(item[0])),
        )
        return [record.to_message(message_id) for message_id, record in ordered]

    def __len__(self) -> int:
        return len(self._records)
