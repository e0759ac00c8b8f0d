from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_CANDIDATE_PATHS = [
    "data/StoreItems.json",
    "../data/StoreItems.json",
    "./data/StoreItems.json",
    "StoreItems.json",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RICS_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    data_root: Path = Field(default=Path("."))
    base_url: AnyHttpUrl | None = None
    candidate_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CANDIDATE_PATHS)
    )
    http_timeout: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("candidate_paths", mode="before")
    @classmethod
    def split_candidate_paths(cls, value: str | list[str] | None):
        if value is None or value == "":
            return list(DEFAULT_CANDIDATE_PATHS)
        if isinstance(value, list):
            return value
        return [p.strip() for p in str(value).split(",") if p.strip()]

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


def get_settings() -> Settings:
    return Settings()
