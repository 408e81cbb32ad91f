# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    # Env-derived defaults go through the validators below as well
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "User Service API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"

    # CORS
    backend_cors_origins: List[AnyHttpUrl] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Outgoing mail
    mail_sender: str = os.getenv("MAIL_SENDER", "no-reply@example.com")
    outbox_size: int = int(os.getenv("OUTBOX_SIZE", "100"))

    # Validation
    max_name_length: int = 255

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
