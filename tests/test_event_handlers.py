import asyncio
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tgbot_client.config import Settings
from tgbot_client.handlers.context import Context
from tgbot_client.handlers.event_handlers import (
    EventHandler,
    Handler,
    InlineQueryHandler,
    InlineResultHandler,
    MessageHandler,
    RawEventHandler,
)
from tgbot_client.model.inline import ChosenInlineResult, InlineQuery
from tgbot_client.model.message import Message
from tgbot_client.model.raw import RawUpdate
from tgbot_client.model.update import Update
from tests.fakes import updates as fake


def make_ctx(update_id: int = 1) -> Context:
    return Context(update_id=update_id, settings=Settings())


def _payloads():
    raw_msg = RawUpdate.model_validate(fake.message(1, "hi"))
    return [
        (EventHandler, Update.from_raw(raw_msg)),
        (RawEventHandler, raw_msg),
        (MessageHandler, Message.from_raw(raw_msg.message)),
        (InlineQueryHandler, InlineQuery.model_validate(fake.inline_query()["inline_query"])),
        (
            InlineResultHandler,
            ChosenInlineResult.model_validate(
                fake.chosen_inline_result()["chosen_inline_result"]
            ),
        ),
    ]


@pytest.mark.parametrize("handler_type,payload", _payloads())
def test_call_runs_callback_exactly_once(handler_type, payload):
    async def main():
        calls = []

        async def func(ctx, value):
            calls.append((ctx, value))

        handler = handler_type(func)
        ctx = make_ctx()
        await handler.call(ctx, payload)

        assert calls == [(ctx, payload)]

    asyncio.run(main())


def test_message_handler_appends_text_to_log():
    async def main():
        log: list[str] = []

        async def on_message(ctx, message):
            log.append(message.text)

        handler = MessageHandler(on_message)
        message = Message.from_raw(RawUpdate.model_validate(fake.message(1, "hello")).message)
        await handler.call(Context(update_id=1, settings=Settings(), data={"id": "ctx1"}), message)

        assert log == ["hello"]

    asyncio.run(main())


def test_call_is_lazy_until_awaited():
    async def main():
        calls = []

        async def func(ctx, value):
            calls.append(value)

        handler = Handler(func)
        pending = handler.call(make_ctx(), "x")
        assert calls == []
        await pending
        assert calls == ["x"]

    asyncio.run(main())


def test_replace_between_invocations_uses_new_function():
    async def main():
        calls = []

        async def old(ctx, value):
            calls.append(("old", value))

        async def new(ctx, value):
            calls.append(("new", value))

        handler = Handler(old)
        await handler.call(make_ctx(), 1)
        await handler.replace(new)
        await handler.call(make_ctx(), 2)

        assert calls == [("old", 1), ("new", 2)]
        assert handler.current is new

    asyncio.run(main())


def test_invocation_past_read_keeps_captured_function():
    async def main():
        release = asyncio.Event()
        calls = []

        async def old(ctx, value):
            calls.append(("old-start", value))
            await release.wait()
            calls.append(("old-end", value))

        async def new(ctx, value):
            calls.append(("new", value))

        handler = Handler(old)
        first = asyncio.create_task(handler.call(make_ctx(), 1))
        await asyncio.sleep(0)
        assert calls == [("old-start", 1)]

        # Replacing must not wait for the suspended callback.
        await asyncio.wait_for(handler.replace(new), timeout=1)
        await handler.call(make_ctx(), 2)

        release.set()
        await first

        assert calls == [("old-start", 1), ("new", 2), ("old-end", 1)]

    asyncio.run(main())


def test_concurrent_invocations_do_not_block_each_other():
    async def main():
        n = 10
        started = 0
        all_started = asyncio.Event()
        finished = []

        async def slow(ctx, value):
            nonlocal started
            started += 1
            if started == n:
                all_started.set()
            # Every callback waits for all of them to be running at once.
            await all_started.wait()
            finished.append(value)

        handler = Handler(slow)
        await asyncio.wait_for(
            asyncio.gather(*(handler.call(make_ctx(i), i) for i in range(n))), timeout=1
        )

        assert sorted(finished) == list(range(n))

    asyncio.run(main())


def test_concurrent_inline_queries_both_complete():
    async def main():
        out: list[str] = []

        async def answer(ctx, query):
            await asyncio.sleep(0.01)
            out.append(query.query)

        handler = InlineQueryHandler(answer)
        queries = [
            InlineQuery.model_validate(fake.inline_query(i, q)["inline_query"])
            for i, q in enumerate(["a", "b"])
        ]
        await asyncio.wait_for(
            asyncio.gather(*(handler.call(make_ctx(), q) for q in queries)), timeout=1
        )

        assert sorted(out) == ["a", "b"]

    asyncio.run(main())


def test_callback_errors_propagate_and_handler_stays_usable():
    async def main():
        calls = []

        async def flaky(ctx, value):
            calls.append(value)
            if value == "boom":
                raise ValueError("boom")

        handler = Handler(flaky)
        with pytest.raises(ValueError, match="boom"):
            await handler.call(make_ctx(), "boom")
        await handler.call(make_ctx(), "ok")

        assert calls == ["boom", "ok"]

    asyncio.run(main())


def test_stateful_callable_objects_are_accepted():
    class Counter:
        def __init__(self) -> None:
            self.seen = 0

        async def __call__(self, ctx, value) -> None:
            self.seen += value

    async def main():
        counter = Counter()
        handler = Handler(counter)
        await handler.call(make_ctx(), 2)
        await handler.call(make_ctx(), 3)
        assert counter.seen == 5

    asyncio.run(main())


def test_set_while_invocation_is_suspended():
    async def main():
        release = asyncio.Event()
        calls = []

        async def old(ctx, value):
            await release.wait()
            calls.append(("old", value))

        async def new(ctx, value):
            calls.append(("new", value))

        handler = MessageHandler(old)
        first = asyncio.create_task(handler.call(make_ctx(), 1))
        await asyncio.sleep(0)

        handler.set(new)
        assert handler.current is new
        await handler.call(make_ctx(), 2)
        release.set()
        await first

        assert calls == [("new", 2), ("old", 1)]

    asyncio.run(main())
