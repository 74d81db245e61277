# chat_backend/models/user.py

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field

class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class LoginResponse(BaseModel):
    token: str

class UserAccount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    encoded_password: str = Field(..., alias="encodedPassword")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
