"""Shared base class and field types for Bot API objects."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer

# The Bot API transmits dates as unix seconds; pydantic parses them into
# aware UTC datetimes and this serializer turns them back into integers.
UnixDateTime = Annotated[
    datetime, PlainSerializer(lambda v: int(v.timestamp()), return_type=int, when_used="json")
]


class TelegramModel(BaseModel):
    """Base for every wire object.

    Unknown fields are kept (``extra="allow"``) so newer API versions do not
    break parsing; they are available through ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible Bot API representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def carried_extra(model: type[TelegramModel], source: TelegramModel) -> dict[str, Any]:
    """Unknown fields of ``source`` that can be passed on to ``model``.

    Keys that clash with a declared field or alias of ``model`` are left out.
    """
    taken = set(model.model_fields)
    taken.update(f.alias for f in model.model_fields.values() if f.alias)
    return {k: v for k, v in (source.model_extra or {}).items() if k not in taken}
