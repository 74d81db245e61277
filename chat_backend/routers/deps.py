# chat_backend/routers/deps.py

from typing import Optional
from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from chat_backend.core.jwt import JwtCredentialValidator
from chat_backend.services.image_store import ImageStore
from chat_backend.services.message_store import MessageStore
from chat_backend.services.user_store import UserAccountStore
from chat_backend.utils.errors import UnauthenticatedError

# Missing credentials are reported by get_current_user, not by the scheme
bearer_scheme = HTTPBearer(auto_error=False)


def get_message_store(request: Request) -> MessageStore:
    return request.app.state.message_store

def get_user_account_store(request: Request) -> UserAccountStore:
    return request.app.state.user_account_store

def get_image_store(request: Request) -> ImageStore:
    return request.app.state.image_store

def get_credential_validator(request: Request) -> JwtCredentialValidator:
    return request.app.state.credential_validator


def get_current_user(
    token: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    validator: JwtCredentialValidator = Depends(get_credential_validator),
) -> str:
    if token is None or not token.credentials:
        raise UnauthenticatedError("Not authenticated")
    return validator.validate(token.credentials)
