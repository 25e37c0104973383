from __future__ import annotations

from .base import TelegramModel, carried_extra
from .inline import ChosenInlineResult, InlineQuery
from .kinds import UpdateFieldsMixin
from .message import Message
from .raw import CallbackQuery, RawMessage, RawUpdate
from .types import Poll, PollAnswer, PreCheckoutQuery, ShippingQuery


def _message(raw: RawMessage | None) -> Message | None:
    return Message.from_raw(raw) if raw is not None else None


class Update(UpdateFieldsMixin, TelegramModel):
    """An incoming update with messages mapped to :class:`Message`.

    At most one payload field is populated; an update with none is valid and
    has ``kind`` ``None``.
    """

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: ChosenInlineResult | None = None
    callback_query: CallbackQuery | None = None
    shipping_query: ShippingQuery | None = None
    pre_checkout_query: PreCheckoutQuery | None = None
    poll: Poll | None = None
    poll_answer: PollAnswer | None = None

    @classmethod
    def from_raw(cls, raw: RawUpdate) -> Update:
        return cls(
            update_id=raw.update_id,
            message=_message(raw.message),
            edited_message=_message(raw.edited_message),
            channel_post=_message(raw.channel_post),
            edited_channel_post=_message(raw.edited_channel_post),
            inline_query=raw.inline_query,
            chosen_inline_result=raw.chosen_inline_result,
            callback_query=raw.callback_query,
            shipping_query=raw.shipping_query,
            pre_checkout_query=raw.pre_checkout_query,
            poll=raw.poll,
            poll_answer=raw.poll_answer,
            **carried_extra(cls, raw),
        )
