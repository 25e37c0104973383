from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from .api.types import GetUpdates, UpdateType


class Settings(BaseSettings):
    """Runtime configuration for the update client.

    Values are loaded from ``TGBOT_``-prefixed environment variables by
    default and may be overridden via CLI flags by the application
    entrypoint.
    """

    # Bot API access
    # Note: allow empty by default so CLI/tests can run without a token.
    # Transports should validate presence when contacting the API.
    bot_token: str = ""
    api_base_url: str = "https://api.telegram.org"

    # Long polling
    poll_timeout_s: int = Field(default=30, ge=0)
    poll_limit: int = Field(default=100, ge=1, le=100)
    allowed_updates: list[UpdateType] | None = None

    # Dispatch
    max_concurrent_updates: PositiveInt = 16
    handler_error_policy: Literal["log", "raise"] = "log"

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_prefix="TGBOT_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    def get_updates(self, offset: int | None = None) -> GetUpdates:
        """Build the ``getUpdates`` request for ``offset``."""
        return GetUpdates(
            offset=offset,
            limit=self.poll_limit,
            timeout=self.poll_timeout_s,
            allowed_updates=self.allowed_updates,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
