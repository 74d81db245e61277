# chat_backend/routers/auth.py

import logging
from fastapi import APIRouter, Depends
from passlib.context import CryptContext
from chat_backend.core.jwt import create_access_token
from chat_backend.models.user import LoginRequest, LoginResponse, UserAccount
from chat_backend.routers.deps import get_user_account_store
from chat_backend.services.user_store import UserAccountStore
from chat_backend.utils.errors import ForbiddenError
from chat_backend.utils.responses import format_response

router = APIRouter(tags=["auth"])
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
logger = logging.getLogger("auth")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


@router.post("/login", response_model=LoginResponse, summary="Log in, creating the account on first use")
async def login(
    credentials: LoginRequest,
    accounts: UserAccountStore = Depends(get_user_account_store),
):
    logger.info(f"Attempting login for: {credentials.username}")

    account = await accounts.get(credentials.username)
    if account is None:
        account = UserAccount(
            username=credentials.username,
            encoded_password=pwd_context.hash(credentials.password),
        )
        await accounts.create(account)
        logger.info(f"Created account for: {credentials.username}")
    elif not verify_password(credentials.password, account.encoded_password):
        logger.warning(f"Password verification failed for: {credentials.username}")
        raise ForbiddenError("Invalid credentials")

    token = create_access_token(data={"sub": account.username})
    logger.info(f"Login successful for: {credentials.username}")
    return LoginResponse(token=token)


@router.post("/logout", summary="Logout")
async def logout():
    # Tokens are self-contained; the client drops its copy
    return format_response(success=True, message="Successfully logged out")
