# chat_backend/core/setup.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from google.cloud import storage
from chat_backend.core.clock import utc_now
from chat_backend.core.config import Settings
from chat_backend.core.jwt import JwtCredentialValidator
from chat_backend.core.logger import logger
from chat_backend.db.mongo import create_mongo_client, verify_mongodb_connection
from chat_backend.routers import auth, messages
from chat_backend.services.image_store import CloudStorageImageStore, LocalImageStore
from chat_backend.services.message_store import InMemoryMessageStore, MongoMessageStore
from chat_backend.services.user_store import InMemoryUserAccountStore, MongoUserAccountStore


def setup_routers(app: FastAPI):
    app.include_router(auth.router, prefix="/auth")
    app.include_router(messages.router, prefix="/messages")


def build_image_store(settings: Settings):
    if settings.IMAGE_BUCKET:
        client = storage.Client(project=settings.GCP_PROJECT_ID)
        return CloudStorageImageStore(client, settings.IMAGE_BUCKET)
    return LocalImageStore(settings.UPLOAD_DIR, settings.IMAGES_BASE_URL)


def configure_services(app: FastAPI, settings: Settings):
    """Attach the stores and the credential validator to ``app.state``."""
    app.state.credential_validator = JwtCredentialValidator(
        settings.SECRET_KEY, settings.JWT_ALGORITHM
    )
    app.state.image_store = build_image_store(settings)
    app.state.mongo_client = None

    if settings.STORE_BACKEND == "memory":
        app.state.message_store = InMemoryMessageStore(clock=utc_now)
        app.state.user_account_store = InMemoryUserAccountStore()
        return

    client = create_mongo_client(settings)
    db = client[settings.MONGODB_DB]
    app.state.mongo_client = client
    app.state.message_store = MongoMessageStore(
        db.get_collection(settings.MESSAGES_COLLECTION), clock=utc_now
    )
    app.state.user_account_store = MongoUserAccountStore(
        db.get_collection(settings.USER_ACCOUNTS_COLLECTION)
    )


def build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_services(app, settings)
        if app.state.mongo_client is not None:
            await verify_mongodb_connection(app.state.mongo_client)
        logger.info(f"🚀 {settings.APP_NAME} is live (store={settings.STORE_BACKEND})")
        try:
            yield
        finally:
            if app.state.mongo_client is not None:
                app.state.mongo_client.close()
                app.state.mongo_client = None

    return lifespan
