from __future__ import annotations

from pydantic import Field

from .base import TelegramModel
from .types import Location, User


class InlineQuery(TelegramModel):
    """An incoming inline query."""

    id: str
    from_user: User = Field(alias="from")
    location: Location | None = None
    # Text of the query, up to 256 characters.
    query: str
    # Offset of the results to be returned, controlled by the bot.
    offset: str


class ChosenInlineResult(TelegramModel):
    """An inline result chosen by a user and sent to their chat partner."""

    result_id: str
    from_user: User = Field(alias="from")
    location: Location | None = None
    # Only present when an inline keyboard is attached to the message.
    inline_message_id: str | None = None
    query: str
