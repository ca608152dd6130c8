"""SyncedRecord: validates required fields and syncs into a list sink."""

from typing import Any

from console import LCConsole
from lifecycle import VariantRegistry

from .base import Record


@VariantRegistry.register
class SyncedRecord(Record):
    """Record that requires a set of fields and appends itself to ``sink``."""

    name = "synced"

    def __init__(self, payload: dict[str, Any] | None = None,
                 required: tuple[str, ...] = ("id",),
                 sink: list | None = None, **kwargs):
        self.required = required
        self.sink = sink if sink is not None else []
        super().__init__(payload, **kwargs)

    def valid(self) -> bool:
        self.events.append("valid")
        missing = [f for f in self.required if f not in self.payload]
        if missing:
            LCConsole().print_warning(f"{self.name}: missing {', '.join(missing)}")
        return not missing

    def sync_method(self):
        self.events.append("sync")
        self.sink.append(dict(self.payload))
