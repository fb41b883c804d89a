# app/scripts/purge_messages.py

import argparse
import asyncio

from motor.motor_asyncio import AsyncIOMotorClient

from app.core.config import settings
from app.core.logger import logger
from app.services.message_store import purge_older_than


async def purge(days: int) -> int:
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    try:
        collection = client[settings.MONGODB_DB][settings.MESSAGES_COLLECTION]
        return await purge_older_than(collection, days)
    finally:
        client.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Delete messages older than N days")
    parser.add_argument("--days", type=int, default=settings.MESSAGE_MAX_AGE_DAYS)
    args = parser.parse_args(argv)

    deleted = asyncio.run(purge(args.days))
    logger.info("Removed %d messages", deleted)


if __name__ == "__main__":
    main()
