# app/routers/messages.py

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.exceptions import RequestValidationError
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError

from app.core.config import settings
from app.db.mongo import get_messages_collection
from app.models.message import MessageCreate, MessageInDB, MessagePage
from app.services.message_store import create_message, delete_message, get_message, list_messages
from app.utils.errors import NotFoundError
from app.utils.responses import format_response

router = APIRouter(tags=["messages"])


@router.get("", summary="List messages, newest first by default")
async def read_messages(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    username: Optional[str] = Query(None, description="Only messages by this author"),
    sort_order: Literal["asc", "desc"] = "desc",
    collection: AsyncIOMotorCollection = Depends(get_messages_collection),
):
    messages, total = await list_messages(
        collection, page=page, page_size=page_size, username=username, sort_order=sort_order
    )
    data = MessagePage(messages=messages, total=total, page=page, page_size=page_size)
    return format_response(
        success=True,
        data=data.model_dump(mode="json"),
        message="Fetched messages",
    )


@router.post(
    "",
    response_model=MessageInDB,
    status_code=status.HTTP_201_CREATED,
    summary="Create a message from a JSON body",
)
async def post_message(
    payload: MessageCreate,
    collection: AsyncIOMotorCollection = Depends(get_messages_collection),
):
    return await create_message(collection, payload)


@router.post(
    "/form",
    response_model=MessageInDB,
    status_code=status.HTTP_201_CREATED,
    summary="Create a message from an HTML form submission",
)
async def post_message_form(
    username: str = Form(...),
    body: str = Form(...),
    collection: AsyncIOMotorCollection = Depends(get_messages_collection),
):
    try:
        payload = MessageCreate(username=username, body=body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
    return await create_message(collection, payload)


@router.get("/{message_id}", response_model=MessageInDB, summary="Get a single message")
async def read_message(
    message_id: str,
    collection: AsyncIOMotorCollection = Depends(get_messages_collection),
):
    message = await get_message(collection, message_id)
    if message is None:
        raise NotFoundError("Message", message_id)
    return message


@router.delete("/{message_id}", summary="Delete a message")
async def remove_message(
    message_id: str,
    collection: AsyncIOMotorCollection = Depends(get_messages_collection),
):
    if not await delete_message(collection, message_id):
        raise NotFoundError("Message", message_id)
    return format_response(success=True, message="Message deleted")
