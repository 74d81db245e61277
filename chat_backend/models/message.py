# chat_backend/models/message.py

import base64
import binascii
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ChatImageData(BaseModel):
    data: str = Field(..., min_length=1, description="Base64-encoded image bytes")
    type: str = Field(..., pattern=r"^[A-Za-z0-9]{1,10}$", description="Image extension, e.g. 'png'")

    @field_validator("data")
    @classmethod
    def check_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("imageData.data must be valid base64")
        return value

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


class MessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1)
    text: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    image_data: Optional[ChatImageData] = Field(default=None, alias="imageData")

    @model_validator(mode="after")
    def check_content(self):
        if self.image_url and self.image_data:
            raise ValueError("imageUrl and imageData are mutually exclusive")
        if not (self.text or self.image_url or self.image_data):
            raise ValueError("A message needs text or an image")
        return self


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    text: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class StoredMessage(BaseModel):
    """Document layout of the ``messages`` collection; the id is the document key."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    timestamp: datetime
    text: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Naive values are read as UTC so they compare with aware ones
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "StoredMessage":
        return cls.model_validate(document)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_message(self, message_id: str) -> Message:
        return Message(
            id=message_id,
            username=self.username,
            text=self.text,
            image_url=self.image_url,
        )
