import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tgbot_client.model.kinds import UpdateKind
from tgbot_client.model.message import Message, MessageContentKind
from tgbot_client.model.other import File
from tgbot_client.model.raw import ChatType, RawUpdate
from tgbot_client.model.update import Update
from tests.fakes import updates as fake


def test_raw_update_parses_wire_fields():
    raw = RawUpdate.model_validate(fake.message(3, "hi"))

    assert raw.kind is UpdateKind.MESSAGE
    assert raw.content is raw.message
    assert raw.message.from_user.username == "ada"
    assert raw.message.chat.type is ChatType.PRIVATE
    assert raw.message.date == datetime.fromtimestamp(1_600_000_000, tz=timezone.utc)


def test_empty_update_has_no_kind():
    raw = RawUpdate.model_validate(fake.empty(9))
    assert raw.kind is None
    assert raw.content is None
    assert Update.from_raw(raw).kind is None


def test_unknown_fields_are_preserved():
    data = fake.message(1)
    data["message"]["has_protected_content"] = True
    data["business_connection"] = {"id": "b1"}

    raw = RawUpdate.model_validate(data)

    assert raw.model_extra == {"business_connection": {"id": "b1"}}
    assert raw.message.model_extra["has_protected_content"] is True


def test_missing_required_field_is_rejected():
    data = fake.message(1)
    del data["message"]["chat"]
    with pytest.raises(ValidationError):
        RawUpdate.model_validate(data)


def test_to_wire_round_trips_aliases_and_dates():
    raw = RawUpdate.model_validate(fake.message(1, "hi"))
    wire = raw.to_wire()

    assert wire["message"]["from"]["id"] == 7
    assert wire["message"]["date"] == 1_600_000_000
    assert "edit_date" not in wire["message"]


def test_message_from_raw_maps_text_and_chat():
    raw = RawUpdate.model_validate(fake.message(1, "hello"))
    message = Message.from_raw(raw.message)

    assert message.content_kind is MessageContentKind.TEXT
    assert message.content == "hello"
    assert message.chat.display_name == "Ada"
    assert message.chat.is_private
    assert not message.is_edited
    assert message.forward is None


def test_animation_wins_over_document():
    document = {"file_id": "f", "file_unique_id": "u", "file_name": "a.gif"}
    animation = {**document, "width": 1, "height": 1, "duration": 2}
    raw = RawUpdate.model_validate(
        fake.message(1, text=None, document=document, animation=animation)
    )

    message = Message.from_raw(raw.message)

    assert message.content_kind is MessageContentKind.ANIMATION
    assert message.content.duration == 2


def test_venue_wins_over_location():
    location = {"latitude": 1.0, "longitude": 2.0}
    venue = {"location": location, "title": "Cafe", "address": "Main st"}
    raw = RawUpdate.model_validate(fake.message(1, text=None, location=location, venue=venue))

    assert Message.from_raw(raw.message).content_kind is MessageContentKind.VENUE


def test_service_flag_and_unknown_content():
    raw = RawUpdate.model_validate(fake.message(1, text=None, group_chat_created=True))
    assert Message.from_raw(raw.message).content_kind is MessageContentKind.GROUP_CHAT_CREATED

    raw = RawUpdate.model_validate(fake.message(2, text=None))
    message = Message.from_raw(raw.message)
    assert message.content_kind is MessageContentKind.UNKNOWN
    assert message.content is None


def test_forward_and_reply_are_mapped():
    reply = fake.message(1, "original")["message"]
    raw = RawUpdate.model_validate(
        fake.message(
            2,
            "fwd",
            forward_date=1_600_000_050,
            forward_from_chat=fake.GROUP_CHAT,
            forward_from_message_id=5,
            reply_to_message=reply,
        )
    )

    message = Message.from_raw(raw.message)

    assert message.forward.from_chat.display_name == "Engine room"
    assert message.forward.from_message_id == 5
    assert message.reply_to_message.text == "original"


def test_pinned_message_content_is_converted():
    pinned = fake.message(1, "pin me")["message"]
    raw = RawUpdate.model_validate(fake.message(2, text=None, pinned_message=pinned))

    message = Message.from_raw(raw.message)

    assert message.content_kind is MessageContentKind.PINNED_MESSAGE
    assert isinstance(message.content, Message)
    assert message.content.text == "pin me"


def test_command_parsing():
    entities = [{"type": "bot_command", "offset": 0, "length": 13}]
    raw = RawUpdate.model_validate(fake.message(1, "/start@my_bot now", entities=entities))
    assert Message.from_raw(raw.message).command() == ("start", "now")

    raw = RawUpdate.model_validate(fake.message(2, "plain text"))
    assert Message.from_raw(raw.message).command() is None


def test_update_from_raw_maps_every_message_field():
    raw = RawUpdate.model_validate(fake.edited_message(4, "fixed"))
    update = Update.from_raw(raw)

    assert update.kind is UpdateKind.EDITED_MESSAGE
    assert isinstance(update.edited_message, Message)
    assert update.edited_message.is_edited
    assert update.content.text == "fixed"


def test_callback_query_keeps_raw_message():
    raw = RawUpdate.model_validate(fake.callback_query(1, data="yes"))
    assert raw.kind is UpdateKind.CALLBACK_QUERY
    assert raw.callback_query.data == "yes"
    assert raw.callback_query.message.text == "hello"


def test_file_download_url():
    file = File(file_id="f", file_unique_id="u", file_path="photos/1.jpg")
    assert file.download_url("TOKEN") == "https://api.telegram.org/file/botTOKEN/photos/1.jpg"
    assert File(file_id="f", file_unique_id="u").download_url("TOKEN") is None


def test_unknown_fields_survive_convenience_mapping():
    data = fake.message(1, "hi", reactions=[{"emoji": "+1"}], content="clash")
    data["message"]["chat"] = {**fake.PRIVATE_CHAT, "is_forum": False}
    data["new_future_field"] = {"a": 1}

    raw = RawUpdate.model_validate(data)
    update = Update.from_raw(raw)

    assert update.model_extra == {"new_future_field": {"a": 1}}
    assert update.message.model_extra == {"reactions": [{"emoji": "+1"}]}
    # Unknown keys that collide with mapped fields do not override them.
    assert update.message.content == "hi"
    assert update.message.chat.model_extra == {"is_forum": False}
    assert update.to_wire()["new_future_field"] == {"a": 1}
