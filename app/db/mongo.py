# app/db/mongo.py
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from app.core.config import settings
from app.core.logger import logger


client = AsyncIOMotorClient(settings.MONGODB_URI)
db = client[settings.MONGODB_DB]

# Collections
messages_collection = db.get_collection(settings.MESSAGES_COLLECTION)


# Function to check DB connection
async def verify_mongodb_connection() -> bool:
    try:
        await client.server_info()
        logger.info("MongoDB connection established (%s)", settings.MONGODB_DB)
        return True
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        return False

async def ensure_indexes():
    await messages_collection.create_index([("created_at", -1)])
    await messages_collection.create_index("username")

async def get_messages_collection() -> AsyncIOMotorCollection:
    return messages_collection
