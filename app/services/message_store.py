# app/services/message_store.py

import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.logger import get_logger
from app.models.message import MessageCreate, MessageInDB
from app.utils.pagination import build_pagination, build_sort

logger = get_logger("store")


def new_message_id() -> str:
    return f"msg-{uuid.uuid4().hex[:12]}"


async def create_message(collection: AsyncIOMotorCollection, data: MessageCreate) -> MessageInDB:
    rec = MessageInDB(
        **data.model_dump(),
        id=new_message_id(),
        created_at=datetime.now(timezone.utc),
    )
    await collection.insert_one(rec.to_document())
    logger.info("Created message %s from %s", rec.id, rec.username)
    return rec


async def list_messages(
    collection: AsyncIOMotorCollection,
    page: int = 1,
    page_size: int = 20,
    username: Optional[str] = None,
    sort_order: str = "desc",
) -> Tuple[List[MessageInDB], int]:
    """
    Return one page of messages and the total number matching the filter.
    Newest first unless sort_order is "asc".
    """
    skip, limit = build_pagination(page, page_size)
    sort = build_sort("created_at", sort_order)
    query = {}
    if username:
        query["username"] = username

    total = await collection.count_documents(query)
    docs = await collection.find(query).sort(sort).skip(skip).limit(limit).to_list(length=limit)
    return [MessageInDB.model_validate(doc) for doc in docs], total


async def get_message(collection: AsyncIOMotorCollection, message_id: str) -> Optional[MessageInDB]:
    doc = await collection.find_one({"_id": message_id})
    if not doc:
        return None
    return MessageInDB.model_validate(doc)


async def delete_message(collection: AsyncIOMotorCollection, message_id: str) -> bool:
    result = await collection.delete_one({"_id": message_id})
    if result.deleted_count:
        logger.info("Deleted message %s", message_id)
        return True
    return False


async def purge_older_than(collection: AsyncIOMotorCollection, days: int) -> int:
    cutoff = datetime.now(timezone.utc) - timedelta(days=days)
    result = await collection.delete_many({"created_at": {"$lt": cutoff}})
    logger.info("Purged %d messages older than %s", result.deleted_count, cutoff.isoformat())
    return result.deleted_count
