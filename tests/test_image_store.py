# tests/test_image_store.py

import asyncio
import base64
from unittest.mock import MagicMock
import pytest
from google.api_core.exceptions import ServiceUnavailable
from pydantic import ValidationError
from chat_backend.models.message import ChatImageData
from chat_backend.services.image_store import CloudStorageImageStore, LocalImageStore
from chat_backend.utils.errors import StoreUnavailableError

PAYLOAD = b"not really a png"


def image(type_="png"):
    return ChatImageData(data=base64.b64encode(PAYLOAD).decode(), type=type_)


def test_local_store_writes_file(tmp_path):
    store = LocalImageStore(str(tmp_path / "images"), "/images/")
    url = asyncio.run(store.save(image("PNG")))

    assert url.startswith("/images/") and url.endswith(".png")
    assert (tmp_path / "images" / url.rsplit("/", 1)[-1]).read_bytes() == PAYLOAD

def test_local_store_uses_unique_names(tmp_path):
    store = LocalImageStore(str(tmp_path))
    assert asyncio.run(store.save(image())) != asyncio.run(store.save(image()))

def test_cloud_store_uploads_blob():
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value
    blob.public_url = "https://storage.googleapis.com/bucket/images/x.jpeg"
    store = CloudStorageImageStore(client, "bucket")

    url = asyncio.run(store.save(image("jpeg")))

    client.bucket.assert_called_once_with("bucket")
    path = client.bucket.return_value.blob.call_args.args[0]
    assert path.startswith("images/") and path.endswith(".jpeg")
    blob.upload_from_string.assert_called_once_with(PAYLOAD, content_type="image/jpeg")
    assert url == blob.public_url

def test_cloud_store_failure_becomes_store_unavailable():
    client = MagicMock()
    client.bucket.return_value.blob.return_value.upload_from_string.side_effect = ServiceUnavailable("down")
    store = CloudStorageImageStore(client, "bucket")

    with pytest.raises(StoreUnavailableError):
        asyncio.run(store.save(image()))

@pytest.mark.parametrize("fields", [
    {"data": "@@@", "type": "png"},
    {"data": "aGk=", "type": "../png"},
    {"data": "", "type": "png"},
])
def test_image_data_validation(fields):
    with pytest.raises(ValidationError):
        ChatImageData(**fields)
