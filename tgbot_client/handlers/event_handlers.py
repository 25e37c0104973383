"""Replaceable async callback holders, one per payload category."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from ..model.inline import ChosenInlineResult, InlineQuery
from ..model.message import Message
from ..model.raw import RawUpdate
from ..model.update import Update
from .context import Context

PayloadT = TypeVar("PayloadT")

HandlerFunc = Callable[[Context, PayloadT], Awaitable[None]]


class Handler(Generic[PayloadT]):
    """Owns exactly one callback for one payload type.

    The callback can be any async callable taking ``(context, payload)``:
    a coroutine function, a closure or an object with an async ``__call__``.

    :meth:`call` only holds the internal lock while it reads the current
    callback, so a callback that suspends never blocks other invocations or
    a concurrent :meth:`replace`. An invocation that already read the
    callback keeps using it even if it is replaced afterwards.
    """

    def __init__(self, func: HandlerFunc[PayloadT]) -> None:
        self._func = func
        self._lock = asyncio.Lock()

    @property
    def current(self) -> HandlerFunc[PayloadT]:
        return self._func

    async def replace(self, func: HandlerFunc[PayloadT]) -> None:
        async with self._lock:
            self._func = func

    def set(self, func: HandlerFunc[PayloadT]) -> None:
        """Synchronous replacement for registration code.

        Only safe when called from the thread running the handler's event
        loop. Readers never suspend while holding the lock, so no read can be
        in progress while this runs. From any other context use :meth:`replace`.
        """
        self._func = func

    def call(self, ctx: Context, payload: PayloadT) -> Awaitable[None]:
        """Return an awaitable that runs the current callback.

        Nothing happens until the result is awaited. Exceptions raised by the
        callback propagate to the awaiting code unchanged.
        """
        return self._invoke(ctx, payload)

    async def _invoke(self, ctx: Context, payload: PayloadT) -> None:
        async with self._lock:
            func = self._func
        await func(ctx, payload)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"{type(self).__name__}({name})"


class EventHandler(Handler[Update]):
    """Receives the full convenience-mapped update."""


class RawEventHandler(Handler[RawUpdate]):
    """Receives the update exactly as parsed from the wire."""


class MessageHandler(Handler[Message]):
    pass


class InlineQueryHandler(Handler[InlineQuery]):
    pass


class InlineResultHandler(Handler[ChosenInlineResult]):
    pass
