from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    PROTOCOL = "protocol"
    HANDLER = "handler"
    CONFIG = "config"


class TgbotClientError(Exception):
    """Base class for errors raised by this package."""


class UpdateParseError(TgbotClientError):
    """A single raw update could not be decoded into a ``RawUpdate``."""

    def __init__(self, message: str, *, update_id: int | None = None) -> None:
        super().__init__(message)
        self.update_id = update_id


class TelegramApiError(TgbotClientError):
    """The Bot API answered with ``"ok": false``."""

    def __init__(
        self, description: str, *, error_code: int | None = None, retry_after: int | None = None
    ) -> None:
        super().__init__(description)
        self.description = description
        self.error_code = error_code
        self.retry_after = retry_after
