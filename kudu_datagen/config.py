"""
Configuration settings for the Kudu data generator.

Uses Pydantic Settings to load environment variables for the Kudu connection,
table layout, insertion pacing and logging.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Kudu
    kudu_masters: str = Field("localhost:8764", alias="KUDU_MASTERS", min_length=1)
    kudu_admin_timeout_ms: Optional[int] = Field(None, alias="KUDU_ADMIN_TIMEOUT_MS")
    kudu_rpc_timeout_ms: Optional[int] = Field(None, alias="KUDU_RPC_TIMEOUT_MS")
    kudu_session_timeout_ms: int = Field(5000, alias="KUDU_SESSION_TIMEOUT_MS")
    connect_retry_attempts: int = Field(3, alias="CONNECT_RETRY_ATTEMPTS", ge=1)

    # Table layout
    table_name: str = Field("test_table", alias="KUDU_TABLE", min_length=1)
    backup_table_name: str = Field("test_table_backup", alias="KUDU_BACKUP_TABLE")
    hash_buckets: int = Field(2, alias="KUDU_HASH_BUCKETS", ge=2)
    unique_key: bool = Field(False, alias="KUDU_UNIQUE_KEY")
    n_replicas: Optional[int] = Field(None, alias="KUDU_REPLICAS", ge=1)

    # Generator
    insert_interval_seconds: float = Field(1.0, alias="DATAGEN_INTERVAL_SECONDS", ge=0)
    value_length: int = Field(5, alias="DATAGEN_VALUE_LENGTH", ge=1)
    max_rows: Optional[int] = Field(None, alias="DATAGEN_MAX_ROWS", ge=1)
    seed: Optional[int] = Field(None, alias="DATAGEN_SEED")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("kudu_masters")
    @classmethod
    def _non_blank_masters(cls, value: str) -> str:
        if not value.strip(" ,"):
            raise ValueError("no Kudu master addresses configured")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
