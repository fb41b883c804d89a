# app/core/config.py

import json
from typing import Annotated, List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # MongoDB settings
    MONGODB_URI: str = Field(default="mongodb://localhost:27017")
    MONGODB_DB: str = Field(default="message_board")
    MESSAGES_COLLECTION: str = Field(default="messages")

    # CORS settings (comma separated or JSON list in the environment)
    CORS_ALLOW_ORIGINS: Annotated[List[str], NoDecode] = Field(default=["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False)
    CORS_ALLOW_METHODS: Annotated[List[str], NoDecode] = Field(default=["GET", "POST", "DELETE", "OPTIONS"])
    CORS_ALLOW_HEADERS: Annotated[List[str], NoDecode] = Field(default=["*"])

    # Message limits
    MAX_USERNAME_LENGTH: int = Field(default=50, gt=0)
    MAX_BODY_LENGTH: int = Field(default=500, gt=0)
    DEFAULT_PAGE_SIZE: int = Field(default=20, gt=0)
    MAX_PAGE_SIZE: int = Field(default=100, gt=0)
    MESSAGE_MAX_AGE_DAYS: int = Field(default=30, gt=0)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Client settings
    API_BASE_URL: str = Field(default="http://localhost:8000")
    REQUEST_TIMEOUT: float = Field(default=10.0, gt=0)

    @field_validator("CORS_ALLOW_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS", mode="before")
    @classmethod
    def split_list(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

settings = Settings()
