"""Builders for raw Bot API update dicts."""

from __future__ import annotations

from typing import Any

USER = {"id": 7, "is_bot": False, "first_name": "Ada", "username": "ada"}
PRIVATE_CHAT = {"id": 7, "type": "private", "first_name": "Ada", "username": "ada"}
GROUP_CHAT = {"id": -100, "type": "supergroup", "title": "Engine room"}


def message(update_id: int = 1, text: str | None = "hello", **fields: Any) -> dict:
    msg = {
        "message_id": update_id * 10,
        "from": USER,
        "date": 1_600_000_000,
        "chat": PRIVATE_CHAT,
        **fields,
    }
    if text is not None:
        msg["text"] = text
    return {"update_id": update_id, "message": msg}


def edited_message(update_id: int = 1, text: str = "edited") -> dict:
    update = message(update_id, text, edit_date=1_600_000_100)
    return {"update_id": update_id, "edited_message": update["message"]}


def inline_query(update_id: int = 1, query: str = "cats") -> dict:
    return {
        "update_id": update_id,
        "inline_query": {"id": f"q{update_id}", "from": USER, "query": query, "offset": ""},
    }


def chosen_inline_result(update_id: int = 1, result_id: str = "r1") -> dict:
    return {
        "update_id": update_id,
        "chosen_inline_result": {"result_id": result_id, "from": USER, "query": "cats"},
    }


def callback_query(update_id: int = 1, data: str = "yes") -> dict:
    return {
        "update_id": update_id,
        "callback_query": {
            "id": f"cb{update_id}",
            "from": USER,
            "chat_instance": "ci",
            "data": data,
            "message": message(update_id)["message"],
        },
    }


def poll_answer(update_id: int = 1) -> dict:
    return {
        "update_id": update_id,
        "poll_answer": {"poll_id": "p1", "user": USER, "option_ids": [0]},
    }


def empty(update_id: int = 1) -> dict:
    return {"update_id": update_id}
