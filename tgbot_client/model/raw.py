"""Wire-shaped update objects.

These mirror the Bot API JSON one to one. Most code should work with the
convenience objects in :mod:`tgbot_client.model.message` and
:mod:`tgbot_client.model.update` instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from .base import TelegramModel, UnixDateTime
from .inline import ChosenInlineResult, InlineQuery
from .kinds import UpdateFieldsMixin
from .types import (
    Animation,
    Audio,
    Contact,
    Dice,
    Document,
    InlineKeyboardMarkup,
    Location,
    MessageEntity,
    PhotoSize,
    Poll,
    PollAnswer,
    PreCheckoutQuery,
    ShippingQuery,
    Sticker,
    User,
    Venue,
    Video,
    VideoNote,
    Voice,
)


class ChatType(str, Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class RawChat(TelegramModel):
    id: int
    type: ChatType
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    # The following are returned only by getChat.
    bio: str | None = None
    description: str | None = None
    invite_link: str | None = None
    pinned_message: RawMessage | None = None
    slow_mode_delay: int | None = None
    sticker_set_name: str | None = None
    can_set_sticker_set: bool | None = None
    linked_chat_id: int | None = None


class RawMessage(TelegramModel):
    message_id: int
    from_user: User | None = Field(default=None, alias="from")
    sender_chat: RawChat | None = None
    date: UnixDateTime
    chat: RawChat

    forward_from: User | None = None
    forward_from_chat: RawChat | None = None
    forward_from_message_id: int | None = None
    forward_signature: str | None = None
    forward_sender_name: str | None = None
    forward_date: UnixDateTime | None = None

    reply_to_message: RawMessage | None = None
    via_bot: User | None = None
    edit_date: UnixDateTime | None = None
    media_group_id: str | None = None
    author_signature: str | None = None

    text: str | None = None
    entities: list[MessageEntity] | None = None
    caption_entities: list[MessageEntity] | None = None
    audio: Audio | None = None
    document: Document | None = None
    animation: Animation | None = None
    game: dict[str, Any] | None = None
    photo: list[PhotoSize] | None = None
    sticker: Sticker | None = None
    video: Video | None = None
    voice: Voice | None = None
    video_note: VideoNote | None = None
    caption: str | None = None
    contact: Contact | None = None
    location: Location | None = None
    venue: Venue | None = None
    poll: Poll | None = None
    dice: Dice | None = None
    new_chat_members: list[User] | None = None
    left_chat_member: User | None = None
    new_chat_title: str | None = None
    new_chat_photo: list[PhotoSize] | None = None

    delete_chat_photo: bool = False
    group_chat_created: bool = False
    supergroup_chat_created: bool = False
    channel_chat_created: bool = False

    migrate_to_chat_id: int | None = None
    migrate_from_chat_id: int | None = None

    pinned_message: RawMessage | None = None
    invoice: dict[str, Any] | None = None
    successful_payment: dict[str, Any] | None = None
    connected_website: str | None = None
    passport_data: dict[str, Any] | None = None
    proximity_alert_triggered: dict[str, Any] | None = None
    reply_markup: InlineKeyboardMarkup | None = None


class CallbackQuery(TelegramModel):
    """A press on a callback button of an inline keyboard."""

    id: str
    from_user: User = Field(alias="from")
    # Absent when the message is too old or was sent via the bot in inline mode.
    message: RawMessage | None = None
    inline_message_id: str | None = None
    chat_instance: str
    data: str | None = None
    game_short_name: str | None = None


class RawUpdate(UpdateFieldsMixin, TelegramModel):
    """The raw update as delivered by ``getUpdates`` or a webhook."""

    update_id: int
    message: RawMessage | None = None
    edited_message: RawMessage | None = None
    channel_post: RawMessage | None = None
    edited_channel_post: RawMessage | None = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: ChosenInlineResult | None = None
    callback_query: CallbackQuery | None = None
    shipping_query: ShippingQuery | None = None
    pre_checkout_query: PreCheckoutQuery | None = None
    poll: Poll | None = None
    poll_answer: PollAnswer | None = None


RawChat.model_rebuild()
RawMessage.model_rebuild()
CallbackQuery.model_rebuild()
RawUpdate.model_rebuild()
