"""Producers of raw update dicts for :class:`UpdateRunner`."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Iterable
from pathlib import Path
from typing import Any

from ..api.types import ApiResponse
from ..errors import ErrorCategory

logger = logging.getLogger(__name__)


def updates_from_response(body: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract the update list from a ``getUpdates`` response body.

    Raises :class:`~tgbot_client.errors.TelegramApiError` when the API
    reported a failure.
    """
    result = ApiResponse.model_validate(body).unwrap()
    return list(result or [])


def _decode_lines(lines: Iterable[str]) -> Iterable[dict[str, Any]]:
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            item = json.loads(line)
        except json.JSONDecodeError:
            logger.warning(
                "invalid_json",
                extra={
                    "event_type": "invalid_json",
                    "line": lineno,
                    "error_category": ErrorCategory.PROTOCOL.value,
                },
            )
            continue
        if isinstance(item, dict) and "ok" in item:
            yield from updates_from_response(item)
        else:
            yield item


def load_updates(path: str | Path) -> list[dict[str, Any]]:
    """Read updates from ``path``.

    Accepted layouts: a JSON array of updates, a ``getUpdates`` response
    body, or one JSON object per line (each either an update or a
    ``getUpdates`` response).
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        # Not a single document, so treat it as JSON lines.
        return list(_decode_lines(text.splitlines()))
    if isinstance(document, list):
        return document
    if isinstance(document, dict) and "ok" in document:
        return updates_from_response(document)
    return [document]


async def iter_json_lines(path: str | Path) -> AsyncIterator[dict[str, Any]]:
    """Async iterator over the updates stored in ``path``."""
    for update in load_updates(path):
        yield update
