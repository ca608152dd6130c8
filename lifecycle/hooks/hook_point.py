"""Hook kinds, abort policies, and the immutable registry records.

Defines HookKind for the three hook slots, AbortPolicy for what happens
to AFTER hooks once an invocation aborts, RunState for the engine's
state machine, and the frozen PhaseSet / HookDescriptor records stored
by the HookRegistry.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class HookKind(Enum):
    """Slot a hook occupies within a lifecycle."""
    BEFORE = auto()
    AFTER = auto()
    AROUND = auto()

    @classmethod
    def coerce(cls, value: 'HookKind | str') -> 'HookKind':
        """Accept a HookKind or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(
            f"Unknown hook kind: {value!r}. "
            f"Expected one of: {', '.join(k.name for k in cls)}"
        )


class AbortPolicy(Enum):
    """What an abort during the BEFORE phase does to the AFTER phase.

    NONE                 — AFTER hooks still run after an abort.
    SKIP_AFTER_ON_ABORT  — an aborted invocation skips straight to DONE.
    """
    NONE = auto()
    SKIP_AFTER_ON_ABORT = auto()

    @classmethod
    def coerce(cls, value: 'AbortPolicy | str') -> 'AbortPolicy':
        """Accept an AbortPolicy or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(
            f"Unknown abort policy: {value!r}. "
            f"Expected one of: {', '.join(p.name for p in cls)}"
        )


class RunState(Enum):
    """States of a single engine invocation."""
    RUNNING_BEFORE = auto()
    RUNNING_BODY = auto()
    RUNNING_AFTER = auto()
    ABORTED = auto()
    DONE = auto()


@dataclass(frozen=True)
class PhaseSet:
    """A named lifecycle and the policy every invocation of it follows.

    ``terminator`` optionally turns a BEFORE hook's return value into an
    abort (e.g. ``halts_on_false``). The ABORT sentinel and ``Abort``
    always abort, with or without a terminator.
    """
    name: str
    abort_policy: AbortPolicy = AbortPolicy.NONE
    terminator: Callable[[Any], bool] | None = None

    @property
    def skips_after_on_abort(self) -> bool:
        return self.abort_policy is AbortPolicy.SKIP_AFTER_ON_ABORT


@dataclass(frozen=True)
class HookDescriptor:
    """One registered hook.

    ``target`` is either a callable (early binding) or a method name
    resolved against the run's owner (late binding). ``if_`` and
    ``unless`` hold conditions bound the same way.
    """
    lifecycle: str
    kind: HookKind
    ordinal: int
    target: Callable[..., Any] | str
    if_: tuple[Callable[[], Any] | str, ...] = field(default=())
    unless: tuple[Callable[[], Any] | str, ...] = field(default=())

    @property
    def is_late_bound(self) -> bool:
        return isinstance(self.target, str)

    @property
    def label(self) -> str:
        """Human-readable target name for tracing and tables."""
        if isinstance(self.target, str):
            return self.target
        return getattr(self.target, '__qualname__', None) or repr(self.target)
