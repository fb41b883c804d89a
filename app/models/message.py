# app/models/message.py
from datetime import datetime, timezone
from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings


class MessageBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(..., min_length=1, description="Author shown next to the message")
    body: str = Field(..., min_length=1, description="Message text")


class MessageCreate(MessageBase):
    # Limits apply when a message is written; stored records are read as they are
    @field_validator("username")
    @classmethod
    def check_username_length(cls, v: str) -> str:
        if len(v) > settings.MAX_USERNAME_LENGTH:
            raise ValueError(f"username must be at most {settings.MAX_USERNAME_LENGTH} characters")
        return v

    @field_validator("body")
    @classmethod
    def check_body_length(cls, v: str) -> str:
        if len(v) > settings.MAX_BODY_LENGTH:
            raise ValueError(f"body must be at most {settings.MAX_BODY_LENGTH} characters")
        return v


class MessageInDB(MessageBase):
    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Mongo hands back naive datetimes that are already UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def to_document(self) -> dict:
        """Return the record as stored in MongoDB."""
        return {
            "_id": self.id,
            "username": self.username,
            "body": self.body,
            "created_at": self.created_at,
        }


class MessagePage(BaseModel):
    messages: List[MessageInDB]
    total: int
    page: int
    page_size: int
