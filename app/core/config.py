# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    # env-derived defaults still go through the validators below
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Login Portal API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"

    # CORS
    backend_cors_origins: List[str] = os.getenv(
        "BACKEND_CORS_ORIGINS", "http://localhost:3000"
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # "orm" uses the SQLAlchemy session, "sql" issues plain statements
    credential_store: str = os.getenv("CREDENTIAL_STORE", "orm")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("credential_store")
    @classmethod
    def check_credential_store(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("orm", "sql"):
            raise ValueError(f"Unknown credential store backend: {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
