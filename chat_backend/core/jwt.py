# chat_backend/core/jwt.py

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from chat_backend.core.config import settings
from chat_backend.utils.errors import UnauthenticatedError

def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    secret_key: str = settings.SECRET_KEY,
    algorithm: str = settings.JWT_ALGORITHM,
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


class JwtCredentialValidator:
    """
    Resolves a bearer token to the username it was issued for.
    Rejects tokens that fail to decode, carry a bad signature, are expired,
    or have no subject.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self._secret_key = secret_key
        self._algorithm = algorithm

    def validate(self, token: str) -> str:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            raise UnauthenticatedError("Could not validate credentials")
        username = payload.get("sub")
        if not username:
            raise UnauthenticatedError("Invalid token")
        return username
