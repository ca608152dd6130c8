"""HookRegistry: named lifecycles and their ordered hook lists.

The registry is append-only while it is being configured and read-only
while hooks run. Nothing here is locked: finish every define_lifecycle /
add_hook call before the first run, then share the registry freely.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .adapter import check_target, normalize_conditions
from .hook_point import AbortPolicy, HookDescriptor, HookKind, PhaseSet
from ..errors import DuplicateLifecycleError, InvalidHookError, UnknownLifecycleError


class HookRegistry:
    """Registry of lifecycles (phase sets) and their hooks.

    Each lifecycle owns one list per HookKind. Descriptors get a
    lifecycle-wide ordinal at registration, which is also their
    execution order within a kind.

    Usage::

        registry = HookRegistry()
        registry.define_lifecycle("execute", AbortPolicy.SKIP_AFTER_ON_ABORT)
        registry.add_hook("execute", HookKind.BEFORE, "valid")
        registry.add_hook("execute", HookKind.AFTER, "sync_method")
    """

    def __init__(self, default_policy: AbortPolicy = AbortPolicy.NONE):
        self._default_policy = AbortPolicy.coerce(default_policy)
        self._lifecycles: dict[str, PhaseSet] = {}
        self._hooks: dict[str, dict[HookKind, list[HookDescriptor]]] = {}
        self._next_ordinal: dict[str, int] = {}

    # --- Configuration ---

    def define_lifecycle(
        self,
        name: str,
        abort_policy: AbortPolicy | str | None = None,
        *,
        terminator: Callable[[Any], bool] | None = None,
    ) -> PhaseSet:
        """Register a new lifecycle. Raises DuplicateLifecycleError if it exists."""
        if not isinstance(name, str) or not name:
            raise ValueError(f"Lifecycle name must be a non-empty string, got {name!r}")
        if name in self._lifecycles:
            raise DuplicateLifecycleError(name)
        if terminator is not None and not callable(terminator):
            raise InvalidHookError(
                f"Terminator must be callable, got {type(terminator).__name__}"
            )
        policy = self._default_policy if abort_policy is None else AbortPolicy.coerce(abort_policy)

        phase_set = PhaseSet(name=name, abort_policy=policy, terminator=terminator)
        self._lifecycles[name] = phase_set
        self._hooks[name] = {kind: [] for kind in HookKind}
        self._next_ordinal[name] = 0
        return phase_set

    def add_hook(
        self,
        name: str,
        kind: HookKind | str,
        target: Callable[..., Any] | str,
        *,
        if_: Any = None,
        unless: Any = None,
    ) -> HookDescriptor:
        """Append a hook to a lifecycle and return its descriptor.

        Args:
            name: Lifecycle name; must already be defined.
            kind: BEFORE, AFTER or AROUND (enum or name).
            target: A callable (early binding) or a method name resolved
                    against the run's owner (late binding). BEFORE/AFTER
                    targets take no arguments; AROUND targets take one,
                    the ``proceed`` continuation.
            if_: Condition(s) that must all be truthy for the hook to run.
            unless: Condition(s) that must all be falsy for the hook to run.
        """
        hooks = self._hooks_by_kind(name)
        try:
            kind = HookKind.coerce(kind)
        except ValueError as e:
            raise InvalidHookError(str(e)) from None

        descriptor = HookDescriptor(
            lifecycle=name,
            kind=kind,
            ordinal=self._next_ordinal[name],
            target=check_target(target),
            if_=normalize_conditions(if_),
            unless=normalize_conditions(unless),
        )
        self._next_ordinal[name] += 1
        hooks[kind].append(descriptor)
        return descriptor

    def before(self, name: str, target, **conditions) -> HookDescriptor:
        return self.add_hook(name, HookKind.BEFORE, target, **conditions)

    def after(self, name: str, target, **conditions) -> HookDescriptor:
        return self.add_hook(name, HookKind.AFTER, target, **conditions)

    def around(self, name: str, target, **conditions) -> HookDescriptor:
        return self.add_hook(name, HookKind.AROUND, target, **conditions)

    # --- Lookup ---

    def hooks_for(self, name: str, kind: HookKind | str) -> tuple[HookDescriptor, ...]:
        """Ordered hooks of one kind. Empty tuple when none are registered."""
        return tuple(self._hooks_by_kind(name)[HookKind.coerce(kind)])

    def all_hooks(self, name: str) -> list[HookDescriptor]:
        """Every hook of a lifecycle, in ordinal order across kinds."""
        hooks = self._hooks_by_kind(name)
        return sorted(
            (d for kind in HookKind for d in hooks[kind]),
            key=lambda d: d.ordinal,
        )

    def lifecycle(self, name: str) -> PhaseSet:
        """Get the PhaseSet for a name. Raises UnknownLifecycleError."""
        if name not in self._lifecycles:
            raise UnknownLifecycleError(name, list(self._lifecycles))
        return self._lifecycles[name]

    def has_lifecycle(self, name: str) -> bool:
        return name in self._lifecycles

    def lifecycle_names(self) -> list[str]:
        """Names in definition order."""
        return list(self._lifecycles)

    def describe(self, name: str) -> list[dict]:
        """Metadata for each hook of a lifecycle, in ordinal order."""
        return [
            {
                'ordinal': d.ordinal,
                'kind': d.kind.name,
                'target': d.label,
                'binding': 'late' if d.is_late_bound else 'early',
                'if': [c if isinstance(c, str) else getattr(c, '__qualname__', repr(c)) for c in d.if_],
                'unless': [c if isinstance(c, str) else getattr(c, '__qualname__', repr(c)) for c in d.unless],
            }
            for d in self.all_hooks(name)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._lifecycles

    def __len__(self) -> int:
        return len(self._lifecycles)

    def __iter__(self) -> Iterator[PhaseSet]:
        return iter(self._lifecycles.values())

    def _hooks_by_kind(self, name: str) -> dict[HookKind, list[HookDescriptor]]:
        if name not in self._hooks:
            raise UnknownLifecycleError(name, list(self._lifecycles))
        return self._hooks[name]
