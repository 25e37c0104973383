from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterable, Iterable
from typing import Any

from pydantic import ValidationError

from ..config import Settings, get_settings
from ..errors import ErrorCategory, UpdateParseError
from ..handlers.context import Context
from ..handlers.dispatcher import Dispatcher, HandlerCategory
from ..metrics import (
    handler_errors_total,
    handler_latency_ms,
    inflight_updates,
    updates_invalid_total,
    updates_received_total,
)
from ..model.raw import RawUpdate

logger = logging.getLogger(__name__)


def parse_update(data: Any) -> RawUpdate:
    """Validate one raw update dict, raising :class:`UpdateParseError`."""
    update_id = data.get("update_id") if isinstance(data, dict) else None
    try:
        return RawUpdate.model_validate(data)
    except ValidationError as exc:
        raise UpdateParseError(
            str(exc), update_id=update_id if isinstance(update_id, int) else None
        ) from exc


async def _aiter(updates: AsyncIterable[Any] | Iterable[Any]):  # noqa: ANN202
    if isinstance(updates, AsyncIterable):
        async for item in updates:
            yield item
    else:
        for item in updates:
            yield item


class UpdateRunner:
    """Feeds updates to a :class:`Dispatcher`, one task per update.

    The runner is transport agnostic: it consumes any iterable of raw update
    dicts (a long polling loop, a webhook queue, a recorded file). At most
    ``settings.max_concurrent_updates`` updates are processed at once.

    Handler failures are always logged and counted. With
    ``handler_error_policy="raise"`` the first failure also stops intake and
    is re-raised from :meth:`run` once in-flight updates have finished;
    with ``"log"`` processing simply continues.
    """

    def __init__(self, dispatcher: Dispatcher, settings: Settings | None = None) -> None:
        self.dispatcher = dispatcher
        self.settings = settings or get_settings()
        self._semaphore = asyncio.Semaphore(self.settings.max_concurrent_updates)
        self._tasks: set[asyncio.Task[None]] = set()
        self._stop = asyncio.Event()
        self._errors: list[Exception] = []
        # Offset to pass to the next getUpdates call.
        self.next_offset: int | None = None

    def _advance(self, update_id: int) -> None:
        if self.next_offset is None or update_id >= self.next_offset:
            self.next_offset = update_id + 1

    async def process(self, raw: RawUpdate) -> HandlerCategory | None:
        """Dispatch ``raw`` inline with a fresh :class:`Context`."""
        ctx = Context(update_id=raw.update_id, settings=self.settings)
        inflight_updates.inc()
        start = time.perf_counter()
        try:
            return await self.dispatcher.dispatch(ctx, raw)
        finally:
            inflight_updates.dec()
            handler_latency_ms.record((time.perf_counter() - start) * 1000)

    async def _run_one(self, raw: RawUpdate) -> None:
        try:
            await self.process(raw)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            handler_errors_total.inc()
            logger.exception(
                "handler_error",
                extra={
                    "event_type": "handler_error",
                    "update_id": raw.update_id,
                    "update_kind": raw.kind.value if raw.kind else None,
                    "error_category": ErrorCategory.HANDLER.value,
                },
            )
            if self.settings.handler_error_policy == "raise":
                self._errors.append(exc)
                self._stop.set()

    async def submit(self, data: Any) -> asyncio.Task[None] | None:
        """Parse ``data`` and schedule it; waits while the runner is saturated.

        Returns the scheduled task, or ``None`` when the update was invalid.
        """
        updates_received_total.inc()
        try:
            raw = parse_update(data)
        except UpdateParseError as exc:
            updates_invalid_total.inc()
            if exc.update_id is not None:
                self._advance(exc.update_id)
            logger.warning(
                "invalid_update",
                extra={
                    "event_type": "invalid_update",
                    "update_id": exc.update_id,
                    "error_category": ErrorCategory.PROTOCOL.value,
                },
            )
            return None

        self._advance(raw.update_id)
        await self._semaphore.acquire()
        task = asyncio.create_task(self._run_one(raw))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        # Also runs for tasks cancelled before their first step.
        task.add_done_callback(lambda _task: self._semaphore.release())
        return task

    async def run(self, updates: AsyncIterable[Any] | Iterable[Any]) -> None:
        """Process every update from ``updates`` and wait for completion."""
        try:
            async for data in _aiter(updates):
                if self._stop.is_set():
                    break
                await self.submit(data)
            await self.drain()
        except asyncio.CancelledError:
            for task in self._tasks:
                task.cancel()
            await asyncio.gather(*self._tasks, return_exceptions=True)
            raise
        if self._errors:
            raise self._errors[0]

    async def drain(self) -> None:
        """Wait until every scheduled update has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Stop accepting updates and wait for in-flight ones."""
        self._stop.set()
        await self.drain()
