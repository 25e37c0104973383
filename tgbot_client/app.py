from __future__ import annotations

import logging
from pathlib import Path

from .config import Settings, get_settings
from .logging import configure_logging


def build_echo_dispatcher():  # noqa: ANN201
    """Dispatcher that logs every update it receives.

    Messages, inline queries and chosen inline results get their own
    handlers; every other kind falls through to the generic event handler.
    """

    from .handlers.dispatcher import Dispatcher

    log = logging.getLogger(__name__)
    dispatcher = Dispatcher()

    @dispatcher.on_message
    async def on_message(ctx, message) -> None:
        log.info(
            "message",
            extra={
                "event_type": "message",
                "update_id": ctx.update_id,
                "update_kind": "message",
                "chat": message.chat.display_name,
                "text": message.text,
            },
        )

    @dispatcher.on_inline_query
    async def on_inline_query(ctx, query) -> None:
        log.info(
            "inline_query",
            extra={"event_type": "inline_query", "update_id": ctx.update_id, "query": query.query},
        )

    @dispatcher.on_inline_result
    async def on_inline_result(ctx, result) -> None:
        log.info(
            "chosen_inline_result",
            extra={
                "event_type": "chosen_inline_result",
                "update_id": ctx.update_id,
                "result_id": result.result_id,
            },
        )

    @dispatcher.on_event
    async def on_event(ctx, update) -> None:
        log.info(
            "update",
            extra={
                "event_type": "update",
                "update_id": ctx.update_id,
                "update_kind": update.kind.value if update.kind else None,
            },
        )

    return dispatcher


async def run(path: str | Path, settings: Settings | None = None):  # noqa: ANN201
    """Replay the updates stored in ``path`` through the echo dispatcher.

    Returns the runner so callers can inspect ``next_offset``.
    """

    configure_logging()
    settings = settings or get_settings()

    # Lazy imports to avoid heavy dependencies during module import.
    from .transport.runner import UpdateRunner
    from .transport.sources import iter_json_lines

    log = logging.getLogger(__name__)

    runner = UpdateRunner(build_echo_dispatcher(), settings)
    log.info(
        "replay starting",
        extra={
            "source": str(path),
            "max_concurrent_updates": settings.max_concurrent_updates,
            "handler_error_policy": settings.handler_error_policy,
        },
    )
    await runner.run(iter_json_lines(path))
    log.info("replay finished", extra={"next_offset": runner.next_offset})
    return runner
