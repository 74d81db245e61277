# chat_backend/services/user_store.py

from typing import Dict, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError
from chat_backend.core.logger import logger
from chat_backend.models.user import UserAccount
from chat_backend.utils.errors import ConflictError, StoreUnavailableError


class UserAccountStore:
    async def get(self, username: str) -> Optional[UserAccount]:
        raise NotImplementedError

    async def create(self, account: UserAccount) -> None:
        raise NotImplementedError


class MongoUserAccountStore(UserAccountStore):
    """Accounts keyed by username (``_id``) in the ``userAccounts`` collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def get(self, username: str) -> Optional[UserAccount]:
        try:
            document = await self._collection.find_one({"_id": username})
        except PyMongoError as e:
            logger.error(f"Failed to read account {username}: {e}")
            raise StoreUnavailableError("User account store unavailable") from e
        if document is None:
            return None
        return UserAccount.model_validate(document)

    async def create(self, account: UserAccount) -> None:
        try:
            await self._collection.insert_one({"_id": account.username, **account.to_document()})
        except DuplicateKeyError:
            raise ConflictError(f"Account '{account.username}' already exists")
        except PyMongoError as e:
            logger.error(f"Failed to create account {account.username}: {e}")
            raise StoreUnavailableError("User account store unavailable") from e


class InMemoryUserAccountStore(UserAccountStore):
    def __init__(self):
        self._accounts: Dict[str, UserAccount] = {}

    async def get(self, username: str) -> Optional[UserAccount]:
        return self._accounts.get(username)

    async def create(self, account: UserAccount) -> None:
        if account.username in self._accounts:
            raise ConflictError(f"Account '{account.username}' already exists")
        self._accounts[account.username] = account
