"""Leaf objects referenced by messages and updates.

Only the fields the library itself reads are declared; everything else the
API sends is preserved as extra data on the model.
"""

from __future__ import annotations

from pydantic import Field

from .base import TelegramModel


class User(TelegramModel):
    id: int
    is_bot: bool = False
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None


class Location(TelegramModel):
    longitude: float
    latitude: float
    horizontal_accuracy: float | None = None
    live_period: int | None = None


class MessageEntity(TelegramModel):
    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None


class PhotoSize(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: int | None = None


class _FileObject(TelegramModel):
    file_id: str
    file_unique_id: str
    file_size: int | None = None
    mime_type: str | None = None


class Audio(_FileObject):
    duration: int
    performer: str | None = None
    title: str | None = None


class Document(_FileObject):
    file_name: str | None = None


class Animation(_FileObject):
    width: int
    height: int
    duration: int
    file_name: str | None = None


class Video(_FileObject):
    width: int
    height: int
    duration: int


class Voice(_FileObject):
    duration: int


class VideoNote(TelegramModel):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    file_size: int | None = None


class Sticker(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool = False
    emoji: str | None = None
    set_name: str | None = None


class Contact(TelegramModel):
    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: int | None = None
    vcard: str | None = None


class Venue(TelegramModel):
    location: Location
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None


class Dice(TelegramModel):
    emoji: str
    value: int


class PollOption(TelegramModel):
    text: str
    voter_count: int


class Poll(TelegramModel):
    id: str
    question: str
    options: list[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: int | None = None


class PollAnswer(TelegramModel):
    poll_id: str
    user: User
    option_ids: list[int]


class InlineKeyboardButton(TelegramModel):
    text: str
    url: str | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None


class InlineKeyboardMarkup(TelegramModel):
    inline_keyboard: list[list[InlineKeyboardButton]]


class ShippingAddress(TelegramModel):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class ShippingQuery(TelegramModel):
    id: str
    from_user: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramModel):
    id: str
    from_user: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: str | None = None
