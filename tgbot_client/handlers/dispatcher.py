"""Update classification and routing to registered handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from ..metrics import updates_dispatched_total, updates_unhandled_total
from ..model.inline import ChosenInlineResult, InlineQuery
from ..model.kinds import UpdateKind
from ..model.message import Message
from ..model.raw import RawUpdate
from ..model.update import Update
from .context import Context
from .event_handlers import (
    EventHandler,
    Handler,
    HandlerFunc,
    InlineQueryHandler,
    InlineResultHandler,
    MessageHandler,
    RawEventHandler,
)

logger = logging.getLogger(__name__)


class HandlerCategory(str, Enum):
    MESSAGE = "message"
    INLINE_QUERY = "inline_query"
    INLINE_RESULT = "inline_result"
    EVENT = "event"
    RAW_EVENT = "raw_event"


_HANDLER_TYPES: dict[HandlerCategory, type[Handler[Any]]] = {
    HandlerCategory.MESSAGE: MessageHandler,
    HandlerCategory.INLINE_QUERY: InlineQueryHandler,
    HandlerCategory.INLINE_RESULT: InlineResultHandler,
    HandlerCategory.EVENT: EventHandler,
    HandlerCategory.RAW_EVENT: RawEventHandler,
}

_TYPED_CATEGORY: dict[UpdateKind, HandlerCategory] = {
    UpdateKind.MESSAGE: HandlerCategory.MESSAGE,
    UpdateKind.INLINE_QUERY: HandlerCategory.INLINE_QUERY,
    UpdateKind.CHOSEN_INLINE_RESULT: HandlerCategory.INLINE_RESULT,
}

_FALLBACK_CHAIN = (HandlerCategory.EVENT, HandlerCategory.RAW_EVENT)


def classify(update: RawUpdate | Update) -> UpdateKind | None:
    """Return the first populated kind in API field order, or ``None``."""
    return update.kind


def route(kind: UpdateKind) -> tuple[HandlerCategory, ...]:
    """Handler categories eligible for ``kind``, most specific first."""
    typed = _TYPED_CATEGORY.get(kind)
    if typed is None:
        return _FALLBACK_CHAIN
    return (typed, *_FALLBACK_CHAIN)


def _payload(category: HandlerCategory, raw: RawUpdate) -> Any:
    if category is HandlerCategory.MESSAGE:
        return Message.from_raw(raw.message)
    if category is HandlerCategory.INLINE_QUERY:
        return raw.inline_query
    if category is HandlerCategory.INLINE_RESULT:
        return raw.chosen_inline_result
    if category is HandlerCategory.EVENT:
        return Update.from_raw(raw)
    return raw


class Dispatcher:
    """Routes each update to exactly one registered handler.

    An update is offered to the handler for its own category first (message,
    inline query or chosen inline result), then to the generic event handler
    and finally to the raw event handler. Only the first registered one runs.
    Empty updates and updates nobody handles are ignored.

    Registration methods work as decorators::

        dispatcher = Dispatcher()


        @dispatcher.on_message
        async def echo(ctx, message): ...

    or as plain calls::

        dispatcher.on_inline_query(answer)

    Registering a category again swaps the callback inside the existing
    :class:`Handler` instead of creating a new one.
    """

    def __init__(self) -> None:
        self._handlers: dict[HandlerCategory, Handler[Any]] = {}

    def handler(self, category: HandlerCategory) -> Handler[Any] | None:
        return self._handlers.get(category)

    def register(self, category: HandlerCategory, func: HandlerFunc[Any]) -> Handler[Any]:
        existing = self._handlers.get(category)
        if existing is not None:
            existing.set(func)
            return existing
        handler = _HANDLER_TYPES[category](func)
        self._handlers[category] = handler
        return handler

    async def replace(self, category: HandlerCategory, func: HandlerFunc[Any]) -> Handler[Any]:
        """Like :meth:`register` but waits for the handler's lock."""
        existing = self._handlers.get(category)
        if existing is None:
            return self.register(category, func)
        await existing.replace(func)
        return existing

    def unregister(self, category: HandlerCategory) -> None:
        self._handlers.pop(category, None)

    def _on(
        self, category: HandlerCategory, func: HandlerFunc[Any] | None
    ) -> HandlerFunc[Any] | Callable[[HandlerFunc[Any]], HandlerFunc[Any]]:
        if func is not None:
            self.register(category, func)
            return func

        def decorator(f: HandlerFunc[Any]) -> HandlerFunc[Any]:
            self.register(category, f)
            return f

        return decorator

    def on_message(self, func: HandlerFunc[Message] | None = None) -> Any:
        return self._on(HandlerCategory.MESSAGE, func)

    def on_inline_query(self, func: HandlerFunc[InlineQuery] | None = None) -> Any:
        return self._on(HandlerCategory.INLINE_QUERY, func)

    def on_inline_result(self, func: HandlerFunc[ChosenInlineResult] | None = None) -> Any:
        return self._on(HandlerCategory.INLINE_RESULT, func)

    def on_event(self, func: HandlerFunc[Update] | None = None) -> Any:
        return self._on(HandlerCategory.EVENT, func)

    def on_raw_event(self, func: HandlerFunc[RawUpdate] | None = None) -> Any:
        return self._on(HandlerCategory.RAW_EVENT, func)

    async def dispatch(self, ctx: Context, raw: RawUpdate) -> HandlerCategory | None:
        """Invoke the matching handler for ``raw``.

        Returns the category that handled the update, or ``None`` when it was
        ignored. Callback exceptions propagate unchanged.
        """
        kind = classify(raw)
        if kind is None:
            updates_unhandled_total.inc()
            logger.debug(
                "update_empty",
                extra={"event_type": "update_empty", "update_id": raw.update_id},
            )
            return None

        for category in route(kind):
            handler = self._handlers.get(category)
            if handler is None:
                continue
            updates_dispatched_total.inc()
            logger.debug(
                "update_dispatched",
                extra={
                    "event_type": "update_dispatched",
                    "update_id": raw.update_id,
                    "update_kind": kind.value,
                    "handler": category.value,
                },
            )
            await handler.call(ctx, _payload(category, raw))
            return category

        updates_unhandled_total.inc()
        logger.debug(
            "update_unhandled",
            extra={
                "event_type": "update_unhandled",
                "update_id": raw.update_id,
                "update_kind": kind.value,
            },
        )
        return None
