# chat_backend/services/image_store.py

import os
from uuid import uuid4
from google.api_core.exceptions import GoogleAPIError
from google.cloud import storage
from starlette.concurrency import run_in_threadpool
from chat_backend.core.logger import logger
from chat_backend.models.message import ChatImageData
from chat_backend.utils.errors import StoreUnavailableError


def image_filename(image: ChatImageData) -> str:
    return f"{uuid4()}.{image.type.lower()}"


class ImageStore:
    async def save(self, image: ChatImageData) -> str:
        """Store the image bytes and return the URL they are served from."""
        raise NotImplementedError


class LocalImageStore(ImageStore):
    """Writes images under ``upload_dir``; the app serves that directory at ``base_url``."""

    def __init__(self, upload_dir: str, base_url: str = "/images"):
        self.upload_dir = upload_dir
        self._base_url = base_url.rstrip("/")

    def _write(self, path: str, payload: bytes) -> None:
        os.makedirs(self.upload_dir, exist_ok=True)
        with open(path, "wb") as f:
            f.write(payload)

    async def save(self, image: ChatImageData) -> str:
        filename = image_filename(image)
        local_path = os.path.join(self.upload_dir, filename)
        try:
            await run_in_threadpool(self._write, local_path, image.to_bytes())
        except OSError as e:
            logger.error(f"Failed to write image {local_path}: {e}")
            raise StoreUnavailableError("Image store unavailable") from e
        return f"{self._base_url}/{filename}"


class CloudStorageImageStore(ImageStore):
    def __init__(self, client: storage.Client, bucket_name: str, prefix: str = "images"):
        self._bucket = client.bucket(bucket_name)
        self._prefix = prefix

    def _upload(self, path: str, payload: bytes, content_type: str) -> str:
        blob = self._bucket.blob(path)
        blob.upload_from_string(payload, content_type=content_type)
        return blob.public_url

    async def save(self, image: ChatImageData) -> str:
        path = f"{self._prefix}/{image_filename(image)}"
        try:
            url = await run_in_threadpool(
                self._upload, path, image.to_bytes(), f"image/{image.type.lower()}"
            )
        except GoogleAPIError as e:
            logger.error(f"Failed to upload image {path}: {e}")
            raise StoreUnavailableError("Image store unavailable") from e
        logger.info(f"Uploaded image {path}")
        return url
