# chat_backend/routers/messages.py

import json
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from chat_backend.models.message import Message, MessageRequest
from chat_backend.routers.deps import get_current_user, get_image_store, get_message_store
from chat_backend.services.image_store import ImageStore
from chat_backend.services.message_store import MessageStore
from chat_backend.services.pagination import page_messages
from chat_backend.utils.errors import CursorNotFoundError

router = APIRouter(tags=["messages"])
logger = logging.getLogger("messages")


@router.get(
    "",
    response_model=List[Message],
    summary="List messages, oldest first, optionally after a given message"
)
async def list_messages(
    current_user: str = Depends(get_current_user),
    from_id: Optional[str] = Query(default=None, alias="fromId"),
    store: MessageStore = Depends(get_message_store),
):
    messages = await store.list_ordered()
    try:
        return page_messages(messages, from_id)
    except CursorNotFoundError:
        logger.info(f"Unknown cursor {from_id!r} requested by {current_user}")
        raise


async def read_message_request(
    request: Request,
    current_user: str = Depends(get_current_user),
) -> MessageRequest:
    """
    Decode the posted message only once the caller is authenticated, so an
    anonymous request gets 403 whatever its body holds.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body",),
            "msg": "JSON decode error",
            "ctx": {"error": str(e)},
        }])
    try:
        return MessageRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
        )


@router.post(
    "",
    response_model=Message,
    summary="Post a message",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": MessageRequest.model_json_schema()}},
        }
    },
)
async def create_message(
    request: MessageRequest = Depends(read_message_request),
    current_user: str = Depends(get_current_user),
    store: MessageStore = Depends(get_message_store),
    images: ImageStore = Depends(get_image_store),
):
    image_url = None
    if request.image_data is not None:
        image_url = await images.save(request.image_data)

    message = await store.create(request, image_url=image_url)
    logger.info(f"Message {message.id} posted by {current_user} as {message.username}")
    return message
