"""Convenience message objects built from their raw counterparts."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from .base import TelegramModel, UnixDateTime, carried_extra
from .raw import ChatType, RawChat, RawMessage
from .types import InlineKeyboardMarkup, MessageEntity, User


class Chat(TelegramModel):
    id: int
    type: ChatType
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    description: str | None = None
    invite_link: str | None = None
    linked_chat_id: int | None = None

    @classmethod
    def from_raw(cls, raw: RawChat) -> Chat:
        return cls(
            id=raw.id,
            type=raw.type,
            title=raw.title,
            username=raw.username,
            first_name=raw.first_name,
            last_name=raw.last_name,
            description=raw.description,
            invite_link=raw.invite_link,
            linked_chat_id=raw.linked_chat_id,
            **carried_extra(cls, raw),
        )

    @property
    def is_private(self) -> bool:
        return self.type is ChatType.PRIVATE

    @property
    def display_name(self) -> str:
        """Title for group-like chats, the person's name for private ones."""
        if self.title:
            return self.title
        name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return name or self.username or str(self.id)


class ForwardInfo(TelegramModel):
    """Origin of a forwarded message."""

    date: UnixDateTime
    from_user: User | None = None
    from_chat: Chat | None = None
    from_message_id: int | None = None
    signature: str | None = None
    sender_name: str | None = None


class MessageContentKind(str, Enum):
    """Which content field of a message is populated.

    Values are the raw field names. Declaration order is the detection order:
    animations also carry a ``document`` and venues a ``location``, so they
    are checked first.
    """

    TEXT = "text"
    ANIMATION = "animation"
    AUDIO = "audio"
    DOCUMENT = "document"
    GAME = "game"
    PHOTO = "photo"
    STICKER = "sticker"
    VIDEO = "video"
    VOICE = "voice"
    VIDEO_NOTE = "video_note"
    CONTACT = "contact"
    DICE = "dice"
    POLL = "poll"
    VENUE = "venue"
    LOCATION = "location"
    NEW_CHAT_MEMBERS = "new_chat_members"
    LEFT_CHAT_MEMBER = "left_chat_member"
    NEW_CHAT_TITLE = "new_chat_title"
    NEW_CHAT_PHOTO = "new_chat_photo"
    DELETE_CHAT_PHOTO = "delete_chat_photo"
    GROUP_CHAT_CREATED = "group_chat_created"
    SUPERGROUP_CHAT_CREATED = "supergroup_chat_created"
    CHANNEL_CHAT_CREATED = "channel_chat_created"
    MIGRATE_TO_CHAT_ID = "migrate_to_chat_id"
    MIGRATE_FROM_CHAT_ID = "migrate_from_chat_id"
    PINNED_MESSAGE = "pinned_message"
    INVOICE = "invoice"
    SUCCESSFUL_PAYMENT = "successful_payment"
    CONNECTED_WEBSITE = "connected_website"
    PASSPORT_DATA = "passport_data"
    PROXIMITY_ALERT_TRIGGERED = "proximity_alert_triggered"
    UNKNOWN = "unknown"


def _detect_content(raw: RawMessage) -> tuple[MessageContentKind, Any]:
    for kind in MessageContentKind:
        if kind is MessageContentKind.UNKNOWN:
            break
        value = getattr(raw, kind.value)
        # Service flags default to False rather than None.
        if value is None or value is False:
            continue
        return kind, value
    return MessageContentKind.UNKNOWN, None


class Message(TelegramModel):
    message_id: int
    date: UnixDateTime
    chat: Chat
    from_user: User | None = Field(default=None, alias="from")
    sender_chat: Chat | None = None
    forward: ForwardInfo | None = None
    reply_to_message: Message | None = None
    via_bot: User | None = None
    edit_date: UnixDateTime | None = None
    media_group_id: str | None = None
    author_signature: str | None = None

    content_kind: MessageContentKind = MessageContentKind.UNKNOWN
    # The populated content field of the raw message, e.g. the text string
    # or the list of photo sizes.
    content: Any = None
    text: str | None = None
    caption: str | None = None
    entities: list[MessageEntity] = Field(default_factory=list)
    reply_markup: InlineKeyboardMarkup | None = None

    @classmethod
    def from_raw(cls, raw: RawMessage) -> Message:
        kind, content = _detect_content(raw)
        if kind is MessageContentKind.PINNED_MESSAGE:
            content = cls.from_raw(content)
        forward = None
        if raw.forward_date is not None:
            forward = ForwardInfo(
                date=raw.forward_date,
                from_user=raw.forward_from,
                from_chat=Chat.from_raw(raw.forward_from_chat) if raw.forward_from_chat else None,
                from_message_id=raw.forward_from_message_id,
                signature=raw.forward_signature,
                sender_name=raw.forward_sender_name,
            )
        return cls(
            message_id=raw.message_id,
            date=raw.date,
            chat=Chat.from_raw(raw.chat),
            from_user=raw.from_user,
            sender_chat=Chat.from_raw(raw.sender_chat) if raw.sender_chat else None,
            forward=forward,
            reply_to_message=cls.from_raw(raw.reply_to_message) if raw.reply_to_message else None,
            via_bot=raw.via_bot,
            edit_date=raw.edit_date,
            media_group_id=raw.media_group_id,
            author_signature=raw.author_signature,
            content_kind=kind,
            content=content,
            text=raw.text,
            caption=raw.caption,
            entities=list(raw.entities or raw.caption_entities or []),
            reply_markup=raw.reply_markup,
            **carried_extra(cls, raw),
        )

    @property
    def is_edited(self) -> bool:
        return self.edit_date is not None

    def command(self) -> tuple[str, str] | None:
        """Split a ``/command@bot args`` text into ``(command, args)``.

        Returns ``None`` when the message does not start with a bot command.
        """
        if not self.text:
            return None
        for entity in self.entities:
            if entity.type == "bot_command" and entity.offset == 0:
                head = self.text[: entity.length]
                name = head[1:].split("@", 1)[0]
                return name, self.text[entity.length :].strip()
        return None
