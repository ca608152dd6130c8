"""Record: shared hook configuration for record variants.

Two lifecycles share the same AFTER hook but abort differently:

- ``execute`` aborts on an explicit signal: ``ensure_valid`` returns
  ABORT when ``valid()`` is false.
- ``execute_checked`` aborts on a falsy return value: ``valid`` itself
  is the BEFORE hook and the lifecycle's terminator is halts_on_false.

Both skip ``sync_method`` once aborted. Variants only override the
abstract methods; they never touch the registry.
"""

from abc import abstractmethod
from typing import Any

from lifecycle import ABORT, AbortPolicy, Hookable, HookKind, LifecycleEngine, halts_on_false

RECORD_ENGINE = LifecycleEngine()
RECORD_ENGINE.define_lifecycle("execute", AbortPolicy.SKIP_AFTER_ON_ABORT)
RECORD_ENGINE.add_hook("execute", HookKind.BEFORE, "ensure_valid")
RECORD_ENGINE.add_hook("execute", HookKind.AROUND, "track_execution")
RECORD_ENGINE.add_hook("execute", HookKind.AFTER, "sync_method")

RECORD_ENGINE.define_lifecycle(
    "execute_checked", AbortPolicy.SKIP_AFTER_ON_ABORT, terminator=halts_on_false,
)
RECORD_ENGINE.add_hook("execute_checked", HookKind.BEFORE, "valid")
RECORD_ENGINE.add_hook("execute_checked", HookKind.AFTER, "sync_method")


class Record(Hookable):
    """Base record. Subclasses must implement ``valid`` and ``sync_method``."""

    name: str = "record"
    engine = RECORD_ENGINE

    def __init__(self, payload: dict[str, Any] | None = None, engine: LifecycleEngine | None = None):
        self.payload = dict(payload or {})
        self.events: list[str] = []
        super().__init__(engine)

    @abstractmethod
    def valid(self) -> bool:
        """Whether the record may be executed."""
        ...

    @abstractmethod
    def sync_method(self):
        """Propagate the executed record somewhere else."""
        ...

    def ensure_valid(self):
        return None if self.valid() else ABORT

    def track_execution(self, proceed):
        self.events.append("start")
        result = proceed()
        self.events.append("finish")
        return result

    def perform(self) -> dict[str, Any]:
        """The body of both lifecycles."""
        self.events.append("perform")
        return dict(self.payload)

    def execute(self):
        return self.run_callbacks("execute", self.perform)

    def execute_checked(self):
        return self.run_callbacks("execute_checked", self.perform)
