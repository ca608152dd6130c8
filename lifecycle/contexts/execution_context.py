"""ExecutionContext: private, per-invocation state of one engine run.

Created when run() is entered and dropped when it returns. Nothing in
it is shared between invocations, so concurrent runs of the same
lifecycle never see each other's abort flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from ..hooks.hook_point import HookDescriptor, HookKind, PhaseSet, RunState


@dataclass
class ExecutionContext:
    """Mutable state of a single run() call.

    ``aborted`` is set by an abort during BEFORE or AROUND.
    ``after_abort_signals`` counts abort signals raised by AFTER hooks:
    they are recorded but never stop the AFTER phase.
    ``states`` is the sequence of RunStates the invocation went through.
    ``calls`` lists the descriptors that actually ran, in call order.
    ``body_result`` holds the body's return value once ``body_ran`` is set.
    """
    phase_set: PhaseSet
    body: Callable[[], Any]
    owner: Any = None
    state: RunState = RunState.RUNNING_BEFORE
    aborted: bool = False
    aborted_by: HookDescriptor | None = None
    body_ran: bool = False
    body_result: Any = None
    after_abort_signals: int = 0
    states: list[RunState] = field(default_factory=lambda: [RunState.RUNNING_BEFORE])
    calls: list[HookDescriptor] = field(default_factory=list)

    @property
    def lifecycle(self) -> str:
        return self.phase_set.name

    def transition(self, state: RunState):
        self.state = state
        self.states.append(state)

    def abort(self, descriptor: HookDescriptor | None):
        """Mark the invocation aborted. AFTER-phase signals are only counted."""
        if descriptor is not None and descriptor.kind is HookKind.AFTER:
            self.after_abort_signals += 1
            return
        if not self.aborted:
            self.aborted = True
            self.aborted_by = descriptor

    @property
    def runs_after(self) -> bool:
        """Whether the AFTER phase should run once BEFORE/body are finished."""
        return not (self.aborted and self.phase_set.skips_after_on_abort)
