from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..config import Settings


@dataclass
class Context:
    """Execution handle passed to every callback.

    One context is created per update and discarded once its handler has
    finished. ``data`` is free for callbacks to use.
    """

    update_id: int
    settings: Settings
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] = field(default_factory=dict)
