"""API service configuration.

All runtime configuration is read from environment variables (or a `.env`
file next to the repository root) through a single `Settings` object.
Route handlers and jobs should call `get_settings()` instead of reading
`os.environ` directly so there is one place to look when a value is wrong.
"""

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(default="sqlite:///./player_performance.db", alias="DATABASE_URL")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
        alias="CORS_ORIGINS",
    )

    # classifier
    classifier_kind: str = Field(default="logistic", alias="CLASSIFIER_KIND")
    random_state: int = Field(default=42, alias="RANDOM_STATE")
    max_iter: int = Field(default=1000, alias="MAX_ITER")

    # training job output
    artifact_dir: str = Field(default="./artifacts", alias="ARTIFACT_DIR")
    model_name: str = Field(default="suitability_v1", alias="MODEL_NAME")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
