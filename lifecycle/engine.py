"""
LifecycleEngine: runs a lifecycle's hooks around a body.

For one invocation: BEFORE hooks in ordinal order (stopping at the first
abort), then the body wrapped by the AROUND chain, then AFTER hooks in
ordinal order. The AFTER phase is skipped only when the invocation
aborted and the lifecycle's policy is SKIP_AFTER_ON_ABORT.
"""

import inspect
from typing import Any, Awaitable, Callable

from rich.markup import escape

from console import LCConsole
from console.utils import apply_style

from .config import EngineConfig
from .contexts import ExecutionContext, HookProfiler
from .hooks.adapter import require_sync, resolve, should_run
from .hooks.hook_point import AbortPolicy, HookDescriptor, HookKind, RunState
from .hooks.registry import HookRegistry
from .hooks.signals import ABORT, ABORTED, Abort


class LifecycleEngine:
    """Executes lifecycles defined in a HookRegistry.

    The engine keeps no per-invocation state of its own; every run gets a
    fresh ExecutionContext. The only thing that outlives a run is the
    optional profiler's timing table.

    Usage::

        engine = LifecycleEngine(registry)
        result = engine.run("execute", lambda: 42, owner=record)
        if result is ABORTED:
            ...
    """

    def __init__(self, registry: HookRegistry | None = None,
                 config: EngineConfig | None = None):
        """
        Args:
            registry: Hook registry to read lifecycles from. A new empty
                      registry (using config.default_policy) when None.
            config: Engine configuration; defaults to EngineConfig().
        """
        self._config = config or EngineConfig()
        self._registry = registry if registry is not None else HookRegistry(
            default_policy=self._config.default_policy,
        )
        self._profiler = HookProfiler(enabled=self._config.profile_hooks)

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def profiler(self) -> HookProfiler:
        """Timing table for hooks and bodies (empty unless profile_hooks)."""
        return self._profiler

    # --- Configuration pass-throughs ---

    def define_lifecycle(self, name: str, abort_policy: AbortPolicy | str | None = None,
                         **kwargs):
        return self._registry.define_lifecycle(name, abort_policy, **kwargs)

    def add_hook(self, name: str, kind: HookKind | str, target, **conditions):
        return self._registry.add_hook(name, kind, target, **conditions)

    # --- Execution ---

    def run(self, name: str, body: Callable[[], Any], *, owner: Any = None) -> Any:
        """Run a lifecycle around ``body``.

        Returns the body's result, or ABORTED when the invocation aborted
        or an AROUND hook never let the body run. AROUND hooks wrap the
        body but cannot replace its result. Exceptions raised by hooks or
        the body propagate unchanged.
        """
        result, _ = self.run_detailed(name, body, owner=owner)
        return result

    def run_detailed(self, name: str, body: Callable[[], Any], *,
                     owner: Any = None) -> tuple[Any, ExecutionContext]:
        """Like run(), but also return the invocation's ExecutionContext."""
        ctx, before, around, after = self._begin(name, body, owner)

        for descriptor in before:
            admitted = self._gate(descriptor, ctx)
            if admitted is ABORT:
                ctx.abort(descriptor)
                break
            if not admitted:
                continue
            value = self._call(descriptor, ctx)
            if self._signals_abort(value, descriptor, ctx):
                ctx.abort(descriptor)
                break

        if not ctx.aborted:
            ctx.transition(RunState.RUNNING_BODY)
            self._run_around_chain(around, 0, ctx)
        result = self._outcome(ctx)

        if ctx.runs_after:
            ctx.transition(RunState.RUNNING_AFTER)
            for descriptor in after:
                admitted = self._gate(descriptor, ctx)
                if admitted is ABORT:
                    self._record_after_abort(descriptor, ctx)
                    continue
                if not admitted:
                    continue
                value = self._call(descriptor, ctx)
                if value is ABORT:
                    self._record_after_abort(descriptor, ctx)

        self._finish(ctx)
        return result, ctx

    async def arun(self, name: str, body: Callable[[], Any], *, owner: Any = None) -> Any:
        """Async run(). Awaits every awaitable before moving to the next hook."""
        result, _ = await self.arun_detailed(name, body, owner=owner)
        return result

    async def arun_detailed(self, name: str, body: Callable[[], Any], *,
                            owner: Any = None) -> tuple[Any, ExecutionContext]:
        ctx, before, around, after = self._begin(name, body, owner)

        for descriptor in before:
            admitted = await self._gate_async(descriptor, ctx)
            if admitted is ABORT:
                ctx.abort(descriptor)
                break
            if not admitted:
                continue
            value = await self._call_async(descriptor, ctx)
            if self._signals_abort(value, descriptor, ctx):
                ctx.abort(descriptor)
                break

        if not ctx.aborted:
            ctx.transition(RunState.RUNNING_BODY)
            await self._run_around_chain_async(around, 0, ctx)
        result = self._outcome(ctx)

        if ctx.runs_after:
            ctx.transition(RunState.RUNNING_AFTER)
            for descriptor in after:
                admitted = await self._gate_async(descriptor, ctx)
                if admitted is ABORT:
                    self._record_after_abort(descriptor, ctx)
                    continue
                if not admitted:
                    continue
                value = await self._call_async(descriptor, ctx)
                if value is ABORT:
                    self._record_after_abort(descriptor, ctx)

        self._finish(ctx)
        return result, ctx

    # --- Internals (sync) ---

    def _begin(self, name, body, owner):
        """Look up the lifecycle and snapshot its hooks. No hook is called here."""
        phase_set = self._registry.lifecycle(name)
        if not callable(body):
            raise TypeError(f"body must be callable, got {type(body).__name__}")
        ctx = ExecutionContext(phase_set=phase_set, body=body, owner=owner)
        if self._config.trace_hooks:
            LCConsole().print(
                f"{apply_style(escape(name), 'lifecycle.name')} "
                f"{apply_style(RunState.RUNNING_BEFORE.name, 'state')}"
            )
        return (
            ctx,
            self._registry.hooks_for(name, HookKind.BEFORE),
            self._registry.hooks_for(name, HookKind.AROUND),
            self._registry.hooks_for(name, HookKind.AFTER),
        )

    @staticmethod
    def _gate(descriptor: HookDescriptor, ctx: ExecutionContext) -> Any:
        """Evaluate conditions. Returns True, False, or ABORT if a condition raised Abort."""
        try:
            return should_run(descriptor, ctx.owner)
        except Abort:
            return ABORT

    def _call(self, descriptor: HookDescriptor, ctx: ExecutionContext, *args) -> Any:
        behaviour = resolve(descriptor.target, ctx.owner)
        ctx.calls.append(descriptor)
        self._trace_call(descriptor, ctx)
        try:
            with self._profiler.section(self._section_name(descriptor)):
                value = behaviour(*args)
        except Abort:
            return ABORT
        return require_sync(value, f"Hook {descriptor.label}")

    def _call_body(self, ctx: ExecutionContext) -> Any:
        ctx.body_ran = True
        if self._config.trace_hooks:
            LCConsole().print(f"  {apply_style('body', 'hook.name')}")
        try:
            with self._profiler.section(f"{ctx.lifecycle}/body"):
                value = ctx.body()
        except Abort:
            ctx.abort(None)
            return ABORTED
        ctx.body_result = require_sync(value, "Body")
        return ctx.body_result

    def _run_around_chain(self, around: tuple[HookDescriptor, ...], index: int,
                          ctx: ExecutionContext) -> Any:
        """Call around[index] with a continuation over the rest of the chain.

        The first-registered AROUND hook is the outermost wrapper.
        """
        if index == len(around):
            return self._call_body(ctx)
        descriptor = around[index]
        admitted = self._gate(descriptor, ctx)
        if admitted is ABORT:
            ctx.abort(descriptor)
            return ABORTED
        if not admitted:
            return self._run_around_chain(around, index + 1, ctx)

        def proceed():
            return self._run_around_chain(around, index + 1, ctx)

        value = self._call(descriptor, ctx, proceed)
        if value is ABORT:
            ctx.abort(descriptor)
            return ABORTED
        return value

    # --- Internals (async) ---

    async def _should_run_async(self, descriptor: HookDescriptor, owner: Any) -> bool:
        for condition in descriptor.if_:
            if not await _resolved(resolve(condition, owner)()):
                return False
        for condition in descriptor.unless:
            if await _resolved(resolve(condition, owner)()):
                return False
        return True

    async def _gate_async(self, descriptor: HookDescriptor, ctx: ExecutionContext) -> Any:
        try:
            return await self._should_run_async(descriptor, ctx.owner)
        except Abort:
            return ABORT

    async def _call_async(self, descriptor: HookDescriptor, ctx: ExecutionContext,
                          *args) -> Any:
        behaviour = resolve(descriptor.target, ctx.owner)
        ctx.calls.append(descriptor)
        self._trace_call(descriptor, ctx)
        try:
            with self._profiler.section(self._section_name(descriptor)):
                return await _resolved(behaviour(*args))
        except Abort:
            return ABORT

    async def _call_body_async(self, ctx: ExecutionContext) -> Any:
        ctx.body_ran = True
        if self._config.trace_hooks:
            LCConsole().print(f"  {apply_style('body', 'hook.name')}")
        try:
            with self._profiler.section(f"{ctx.lifecycle}/body"):
                ctx.body_result = await _resolved(ctx.body())
        except Abort:
            ctx.abort(None)
            return ABORTED
        return ctx.body_result

    async def _run_around_chain_async(self, around: tuple[HookDescriptor, ...], index: int,
                                      ctx: ExecutionContext) -> Any:
        if index == len(around):
            return await self._call_body_async(ctx)
        descriptor = around[index]
        admitted = await self._gate_async(descriptor, ctx)
        if admitted is ABORT:
            ctx.abort(descriptor)
            return ABORTED
        if not admitted:
            return await self._run_around_chain_async(around, index + 1, ctx)

        async def proceed():
            return await self._run_around_chain_async(around, index + 1, ctx)

        value = await self._call_async(descriptor, ctx, proceed)
        if value is ABORT:
            ctx.abort(descriptor)
            return ABORTED
        return value

    # --- Shared helpers ---

    def _outcome(self, ctx: ExecutionContext) -> Any:
        """The run's result: the body's value, or ABORTED if it aborted or never ran."""
        if ctx.aborted:
            ctx.transition(RunState.ABORTED)
            self._trace_abort(ctx)
            return ABORTED
        if not ctx.body_ran:
            return ABORTED
        return ctx.body_result

    @staticmethod
    def _signals_abort(value: Any, descriptor: HookDescriptor, ctx: ExecutionContext) -> bool:
        """Whether a BEFORE hook's return value aborts the invocation."""
        if value is ABORT:
            return True
        terminator = ctx.phase_set.terminator
        return terminator is not None and bool(terminator(value))

    def _record_after_abort(self, descriptor: HookDescriptor, ctx: ExecutionContext):
        ctx.abort(descriptor)
        if self._config.trace_hooks:
            LCConsole().print_warning(
                f"AFTER hook '{escape(descriptor.label)}' signalled abort in "
                f"'{escape(ctx.lifecycle)}'; remaining AFTER hooks still run"
            )

    def _finish(self, ctx: ExecutionContext):
        ctx.transition(RunState.DONE)
        if self._config.trace_hooks:
            LCConsole().print(
                f"{apply_style(escape(ctx.lifecycle), 'lifecycle.name')} "
                f"{apply_style(RunState.DONE.name, 'state')}"
            )

    def _trace_call(self, descriptor: HookDescriptor, ctx: ExecutionContext):
        if not self._config.trace_hooks:
            return
        kind = descriptor.kind.name.lower()
        LCConsole().print(
            f"  {apply_style(kind, f'hook.{kind}')} "
            f"{apply_style(escape(descriptor.label), 'hook.name')} "
            f"[detail]#{descriptor.ordinal}[/detail]"
        )

    def _trace_abort(self, ctx: ExecutionContext):
        if not self._config.trace_hooks:
            return
        source = escape(ctx.aborted_by.label) if ctx.aborted_by is not None else 'body'
        skipping = " (skipping AFTER hooks)" if not ctx.runs_after else ""
        LCConsole().print(
            f"  {apply_style(RunState.ABORTED.name, 'state.aborted')} "
            f"[detail]by {source}{skipping}[/detail]"
        )

    @staticmethod
    def _section_name(descriptor: HookDescriptor) -> str:
        return f"{descriptor.lifecycle}/{descriptor.kind.name.lower()}:{descriptor.label}"


async def _resolved(value: Any | Awaitable[Any]) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(value):
        return await value
    return value
