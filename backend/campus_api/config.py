"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every field can be overridden by an environment variable of the same name
    - get_settings() is cached (lru_cache), one Settings instance per process

Design Decisions:
    - Defaults match docker-compose so the API starts with no .env file
    - registry_data_path unset → built-in seed catalogue, nothing written on shutdown
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Housing service (relational store)
    database_url: str = "postgresql+asyncpg://campus:campus@db:5432/campus"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Course registry (in-memory store)
    registry_data_path: str | None = None
    registry_persist_on_shutdown: bool = False

    cors_origins: list[str] = ["http://localhost:5173"]

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v: str) -> str:
        """postgres:// and postgresql:// URLs are rewritten to the asyncpg driver."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    @field_validator("registry_data_path", mode="before")
    @classmethod
    def blank_path_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
