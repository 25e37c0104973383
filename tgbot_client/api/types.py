"""Payloads sent to Bot API endpoints and the envelope they answer with.

Each request model serializes with :meth:`TelegramModel.to_wire` into the
JSON body the endpoint expects.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field

from ..errors import TelegramApiError
from ..model.base import TelegramModel
from ..model.other import ParseMode
from ..model.types import InlineKeyboardMarkup


class UpdateType(str, Enum):
    """Update kinds a bot can subscribe to through ``allowed_updates``."""

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


class GetUpdates(TelegramModel):
    """Body of ``getUpdates``."""

    endpoint: ClassVar[str] = "getUpdates"

    # Identifier of the first update to be returned. Must be greater by one
    # than the highest identifier of previously received updates.
    offset: int | None = None
    limit: int | None = Field(default=None, ge=1, le=100)
    # Long polling timeout in seconds.
    timeout: int | None = Field(default=None, ge=0)
    allowed_updates: list[UpdateType] | None = None


# Input message content ------------------------------------------------------


class InputTextMessageContent(TelegramModel):
    message_text: str = Field(min_length=1, max_length=4096)
    parse_mode: ParseMode | None = None
    disable_web_page_preview: bool = False


class InputLocationMessageContent(TelegramModel):
    latitude: float
    longitude: float
    live_period: int | None = Field(default=None, ge=60, le=86400)


class InputVenueMessageContent(TelegramModel):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None


class InputContactMessageContent(TelegramModel):
    phone_number: str
    first_name: str
    last_name: str | None = None
    vcard: str | None = None


# The API distinguishes these by their fields, not by a tag. Venue is listed
# before location because a venue payload is a superset of a location one.
InputMessageContent = Union[
    InputTextMessageContent,
    InputVenueMessageContent,
    InputLocationMessageContent,
    InputContactMessageContent,
]


# Inline query results -------------------------------------------------------


class _InlineResult(TelegramModel):
    # Unique identifier for this result, 1-64 bytes.
    id: str = Field(min_length=1, max_length=64)
    reply_markup: InlineKeyboardMarkup | None = None


class _Thumbnailed(_InlineResult):
    thumb_url: str | None = None
    thumb_width: int | None = None
    thumb_height: int | None = None


class InlineQueryResultArticle(_Thumbnailed):
    type: Literal["article"] = "article"
    title: str
    input_message_content: InputMessageContent
    url: str | None = None
    hide_url: bool = False
    description: str | None = None


class InlineQueryResultPhoto(_InlineResult):
    type: Literal["photo"] = "photo"
    photo_url: str
    thumb_url: str
    photo_width: int | None = None
    photo_height: int | None = None
    title: str | None = None
    description: str | None = None
    caption: str | None = Field(default=None, max_length=1024)
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultGif(_InlineResult):
    type: Literal["gif"] = "gif"
    gif_url: str
    thumb_url: str
    gif_width: int | None = None
    gif_height: int | None = None
    gif_duration: int | None = None
    title: str | None = None
    caption: str | None = Field(default=None, max_length=1024)
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultMpeg4Gif(_InlineResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_url: str
    thumb_url: str
    mpeg4_width: int | None = None
    mpeg4_height: int | None = None
    mpeg4_duration: int | None = None
    title: str | None = None
    caption: str | None = Field(default=None, max_length=1024)
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultVideo(_InlineResult):
    type: Literal["video"] = "video"
    video_url: str
    # "text/html" or "video/mp4"
    mime_type: str
    thumb_url: str
    title: str
    video_width: int | None = None
    video_height: int | None = None
    video_duration: int | None = None
    description: str | None = None
    caption: str | None = Field(default=None, max_length=1024)
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultAudio(_InlineResult):
    type: Literal["audio"] = "audio"
    audio_url: str
    title: str
    caption: str | None = Field(default=None, max_length=1024)
    performer: str | None = None
    audio_duration: int | None = None
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultVoice(_InlineResult):
    type: Literal["voice"] = "voice"
    voice_url: str
    title: str
    caption: str | None = Field(default=None, max_length=1024)
    voice_duration: int | None = None
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultDocument(_Thumbnailed):
    type: Literal["document"] = "document"
    document_url: str
    title: str
    # "application/pdf" or "application/zip"
    mime_type: str
    caption: str | None = Field(default=None, max_length=1024)
    description: str | None = None
    parse_mode: ParseMode | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultLocation(_Thumbnailed):
    type: Literal["location"] = "location"
    latitude: float
    longitude: float
    title: str
    live_period: int | None = Field(default=None, ge=60, le=86400)
    input_message_content: InputMessageContent | None = None


class InlineQueryResultVenue(_Thumbnailed):
    type: Literal["venue"] = "venue"
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultContact(_Thumbnailed):
    type: Literal["contact"] = "contact"
    phone_number: str
    first_name: str
    last_name: str | None = None
    vcard: str | None = None
    input_message_content: InputMessageContent | None = None


class InlineQueryResultGame(_InlineResult):
    type: Literal["game"] = "game"
    game_short_name: str


InlineQueryResult = Annotated[
    Union[
        InlineQueryResultArticle,
        InlineQueryResultPhoto,
        InlineQueryResultGif,
        InlineQueryResultMpeg4Gif,
        InlineQueryResultVideo,
        InlineQueryResultAudio,
        InlineQueryResultVoice,
        InlineQueryResultDocument,
        InlineQueryResultLocation,
        InlineQueryResultVenue,
        InlineQueryResultContact,
        InlineQueryResultGame,
    ],
    Field(discriminator="type"),
]


class AnswerInlineQuery(TelegramModel):
    """Body of ``answerInlineQuery``."""

    endpoint: ClassVar[str] = "answerInlineQuery"

    inline_query_id: str
    results: list[InlineQueryResult] = Field(max_length=50)
    # Server side cache lifetime in seconds, the API defaults to 300.
    cache_time: int | None = None
    is_personal: bool = False
    # Offset length can't exceed 64 bytes; empty means no more results.
    next_offset: str | None = Field(default=None, max_length=64)
    switch_pm_text: str | None = None
    # Deep-linking parameter: 1-64 characters of A-Z, a-z, 0-9, _ and -.
    switch_pm_parameter: str | None = Field(
        default=None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$"
    )


# Responses ------------------------------------------------------------------


class ResponseParameters(TelegramModel):
    migrate_to_chat_id: int | None = None
    # Seconds to wait before repeating a request that hit flood control.
    retry_after: int | None = None


class ApiResponse(TelegramModel):
    """Envelope every Bot API method answers with."""

    ok: bool
    result: Any = None
    description: str | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None

    def unwrap(self) -> Any:
        """Return ``result`` or raise :class:`TelegramApiError`."""
        if self.ok:
            return self.result
        raise TelegramApiError(
            self.description or "request failed",
            error_code=self.error_code,
            retry_after=self.parameters.retry_after if self.parameters else None,
        )
