"""Environment configuration for the VIKAS assistant."""
from __future__ import annotations

from functools import cached_property
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    TELEGRAM_TOKEN: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    ENV: str = "dev"
    DIAG: int = 0

    # timestamps on chat messages
    TZ: str = "Asia/Kolkata"

    # overrides the bundled domain/replies/replies.yaml
    REPLIES_PATH: Optional[str] = None

    # messages kept per chat, chats kept in memory
    HISTORY_LIMIT: int = 200
    SESSION_LIMIT: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def is_prod(self) -> bool:
        return self.ENV.lower() == "prod"

    @cached_property
    def is_diag(self) -> bool:
        return bool(int(self.DIAG))

    def bot_token(self) -> str:
        token = (self.TELEGRAM_TOKEN or "").strip()
        if token:
            return token
        if self.ENV.lower() in {"dev", "test"}:
            return "TEST:TOKEN"
        raise RuntimeError("TELEGRAM_TOKEN is missing and no dev fallback allowed")


settings = Settings()
