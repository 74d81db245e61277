# chat_backend/db/mongo.py

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from chat_backend.core.config import Settings
from chat_backend.core.logger import logger


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True)


# Function to check DB connection
async def verify_mongodb_connection(client: AsyncIOMotorClient) -> bool:
    try:
        await client.admin.command("ping")
        logger.info("MongoDB connection established")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB connection failed: {str(e)}")
        return False
