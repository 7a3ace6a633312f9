"""Application settings loaded from environment variables and config files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tubeflow.config import SETTINGS_FILE


class ApiConfig(BaseModel):
    """HTTP server configuration read from the ``api`` section of ``settings.yaml``."""

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = ConfigDict(extra="ignore")


def _load_api_config(settings_path: Path) -> ApiConfig:
    if not settings_path.exists():
        return ApiConfig()

    raw_data = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    return ApiConfig(**(raw_data.get("api") or {}))


class Settings(BaseSettings):
    """Primary application settings for the Tubeflow API and CLI.

    Built once at the entry point and handed to the services that need it; the workflow
    computations never read configuration.
    """

    manuscript_dir: Path = Field(default=Path("manuscript"), alias="MANUSCRIPT_DIR")
    index_path: Path = Field(default=Path("index.yaml"), alias="INDEX_PATH")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    api: ApiConfig = Field(default_factory=lambda: _load_api_config(SETTINGS_FILE))

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


__all__ = ["ApiConfig", "Settings", "get_settings"]
