from __future__ import annotations

from enum import Enum

from .base import TelegramModel


class BotCommand(TelegramModel):
    """A bot command."""

    # The command name, for example "ping" for the command "/ping".
    command: str
    description: str


class ParseMode(str, Enum):
    """Formatting style for message text.

    ``MARKDOWN`` only exists for backwards compatibility, prefer
    ``MARKDOWN_V2``.
    """

    MARKDOWN_V2 = "MarkdownV2"
    MARKDOWN = "Markdown"
    HTML = "HTML"


class ChatAction(str, Enum):
    """What the user is about to receive, shown as a chat status."""

    TYPING = "typing"
    UPLOAD_PHOTO = "upload_photo"
    RECORD_VIDEO = "record_video"
    UPLOAD_VIDEO = "upload_video"
    RECORD_AUDIO = "record_audio"
    UPLOAD_AUDIO = "upload_audio"
    UPLOAD_DOCUMENT = "upload_document"
    FIND_LOCATION = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class File(TelegramModel):
    file_id: str
    file_unique_id: str
    file_size: int | None = None
    # Valid for at least one hour; download from
    # ``https://api.telegram.org/file/bot<token>/<file_path>``.
    file_path: str | None = None

    def download_url(self, token: str, base_url: str = "https://api.telegram.org") -> str | None:
        if self.file_path is None:
            return None
        return f"{base_url.rstrip('/')}/file/bot{token}/{self.file_path}"
