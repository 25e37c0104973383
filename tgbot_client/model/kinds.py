from __future__ import annotations

from enum import Enum
from typing import Any


class UpdateKind(str, Enum):
    """Payload kinds of an update, in the order the API defines them.

    Values are the field names on both ``RawUpdate`` and ``Update``.
    """

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"


class UpdateFieldsMixin:
    """Kind lookup shared by the raw and the convenience update models."""

    @property
    def kind(self) -> UpdateKind | None:
        """First populated payload kind, or ``None`` for an empty update."""
        for kind in UpdateKind:
            if getattr(self, kind.value, None) is not None:
                return kind
        return None

    @property
    def content(self) -> Any:
        """The populated payload, or ``None``."""
        kind = self.kind
        return getattr(self, kind.value) if kind is not None else None
