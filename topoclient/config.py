from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Analyzer
    TOPOLOGY_API_URL: str = "http://localhost:8082"
    HTTP_TIMEOUT: float | None = Field(default=None, description="Seconds; unset means no timeout")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="'json' for production, 'console' for dev")

    @property
    def base_url(self) -> str:
        """Analyzer base URL (no trailing slash)."""
        return self.TOPOLOGY_API_URL.rstrip("/")


def get_settings() -> Settings:
    return Settings()
