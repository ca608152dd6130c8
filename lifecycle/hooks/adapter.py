"""Hook adapter: binds registered targets to concrete behaviour.

Early-bound targets are callables captured at ``add_hook`` time and are
called as-is. Late-bound targets are method names resolved against the
owner object on every run, so a subclass that overrides the method
changes the hook without touching the registry.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable, TYPE_CHECKING

from ..errors import HookResolutionError, InvalidHookError

if TYPE_CHECKING:
    from .hook_point import HookDescriptor
    from .registry import HookRegistry


def check_target(target: Any, what: str = "hook target") -> Callable[..., Any] | str:
    """Validate a target at registration time.

    Returns the target unchanged. Strings must be valid identifiers;
    anything else must be callable.
    """
    if isinstance(target, str):
        if not target.isidentifier():
            raise InvalidHookError(
                f"Late-bound {what} must be a method name, got {target!r}"
            )
        return target
    if not callable(target):
        raise InvalidHookError(
            f"{what.capitalize()} must be callable or a method name, "
            f"got {type(target).__name__}"
        )
    return target


def normalize_conditions(conditions: Any) -> tuple[Callable[[], Any] | str, ...]:
    """Turn ``None`` / a single condition / an iterable into a checked tuple."""
    if conditions is None:
        return ()
    if isinstance(conditions, str) or callable(conditions):
        conditions = (conditions,)
    return tuple(check_target(c, "condition") for c in conditions)


def resolve(target: Callable[..., Any] | str, owner: Any) -> Callable[..., Any]:
    """Resolve a target to a callable for the current invocation."""
    if not isinstance(target, str):
        return target
    if owner is None:
        raise HookResolutionError(
            f"Hook '{target}' is late-bound but run() was given no owner"
        )
    behaviour = getattr(owner, target, None)
    if behaviour is None:
        raise HookResolutionError(
            f"{type(owner).__name__} has no method '{target}'"
        )
    if not callable(behaviour):
        raise HookResolutionError(
            f"{type(owner).__name__}.{target} is not callable"
        )
    return behaviour


def require_sync(value: Any, what: str) -> Any:
    """Return ``value`` unless it is awaitable, which synchronous runs cannot honour."""
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        raise TypeError(
            f"{what} returned an awaitable; use arun() for async hooks"
        )
    return value


def should_run(descriptor: 'HookDescriptor', owner: Any) -> bool:
    """Evaluate the hook's ``if_`` / ``unless`` conditions (synchronous).

    An ``Abort`` raised by a condition propagates to the caller, which
    decides what it means for the current phase.
    """
    for condition in descriptor.if_:
        if not require_sync(resolve(condition, owner)(), f"Condition of {descriptor.label}"):
            return False
    for condition in descriptor.unless:
        if require_sync(resolve(condition, owner)(), f"Condition of {descriptor.label}"):
            return False
    return True


def late_bound_names(descriptors: Iterable['HookDescriptor']) -> list[str]:
    """All method names (targets and conditions) a set of hooks needs."""
    names = []
    for descriptor in descriptors:
        for ref in (descriptor.target, *descriptor.if_, *descriptor.unless):
            if isinstance(ref, str) and ref not in names:
                names.append(ref)
    return names


def verify_owner(registry: 'HookRegistry', owner: Any,
                 lifecycles: Iterable[str] | None = None):
    """Check that ``owner`` can satisfy every late-bound name.

    Raises HookResolutionError naming the first missing method. Used at
    construction time so a variant missing a hook fails before its first
    run rather than in the middle of one.
    """
    names = lifecycles if lifecycles is not None else registry.lifecycle_names()
    for name in names:
        for method_name in late_bound_names(registry.all_hooks(name)):
            resolve(method_name, owner)
