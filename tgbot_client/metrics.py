from __future__ import annotations


class Counter:
    def __init__(self) -> None:
        self.value = 0

    def inc(self, n: int = 1) -> None:
        self.value += n


class Gauge:
    def __init__(self) -> None:
        self.value = 0

    def set(self, v: int) -> None:
        self.value = v

    def inc(self, n: int = 1) -> None:
        self.value += n

    def dec(self, n: int = 1) -> None:
        self.value -= n


class Timer:
    """Keeps the most recent duration in milliseconds."""

    def __init__(self) -> None:
        self.last_ms: float | None = None

    def record(self, ms: float) -> None:
        self.last_ms = ms


def reset_all() -> None:
    """Zero every module-level instrument."""
    for counter in (
        updates_received_total,
        updates_dispatched_total,
        updates_unhandled_total,
        updates_invalid_total,
        handler_errors_total,
    ):
        counter.value = 0
    inflight_updates.set(0)
    handler_latency_ms.last_ms = None


updates_received_total = Counter()
updates_dispatched_total = Counter()
updates_unhandled_total = Counter()
updates_invalid_total = Counter()
handler_errors_total = Counter()
inflight_updates = Gauge()
handler_latency_ms = Timer()
