# chat_backend/core/config.py

import os
from typing import List, Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    APP_NAME: str = Field(default="Chat Backend")
    LOG_LEVEL: str = Field(default="INFO")
    ALLOWED_ORIGINS: List[str] = Field(default=["http://localhost:4200"])
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=8080)

    # Auth/JWT settings
    SECRET_KEY: str = Field(...)
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24)

    # Storage settings ("memory" keeps messages and accounts in-process)
    STORE_BACKEND: Literal["mongo", "memory"] = Field(default="mongo")

    # MongoDB settings
    MONGODB_URI: str = Field(default="mongodb://localhost:27017")
    MONGODB_DB: str = Field(default="chat")
    MESSAGES_COLLECTION: str = Field(default="messages")
    USER_ACCOUNTS_COLLECTION: str = Field(default="userAccounts")

    # Image settings; a bucket name switches uploads to Google Cloud Storage
    UPLOAD_DIR: str = Field(default=os.path.abspath("uploads/images"))
    IMAGES_BASE_URL: str = Field(default="/images")
    IMAGE_BUCKET: Optional[str] = Field(default=None)
    GCP_PROJECT_ID: Optional[str] = Field(default=None)

settings = Settings()
