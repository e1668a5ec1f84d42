# File: userposts/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, AnyHttpUrl, Field, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "userposts API"
    VERSION: str = "0.1.0"

    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Where run() binds uvicorn
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "3000"))

    # CORS
    backend_cors_origins: List[AnyHttpUrl] = Field(
        default=os.getenv("BACKEND_CORS_ORIGINS", ""), validate_default=True
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./userposts.db")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
