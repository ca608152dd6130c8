"""Hookable: base class for objects that supply late-bound hook targets.

A Hookable subclass points at a LifecycleEngine whose registry names its
hook methods. Subclasses override those methods to change behaviour; the
registry itself is configured once and shared by every variant.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, TYPE_CHECKING

from .adapter import verify_owner

if TYPE_CHECKING:
    from ..engine import LifecycleEngine
    from ..contexts import ExecutionContext


class Hookable(ABC):
    """Owner object for late-bound hooks.

    Subclasses set ``engine`` (class-level) or pass one to __init__, and
    may set ``lifecycles`` to limit which lifecycles are checked at
    construction. Hook methods every variant must provide are declared
    with ``@abstractmethod`` so an incomplete variant cannot be built.

    With ``engine.config.strict_bindings`` on, construction also fails
    with HookResolutionError when a registered method name has no
    callable on the instance.
    """

    engine: 'LifecycleEngine | None' = None
    lifecycles: tuple[str, ...] | None = None

    def __init__(self, engine: 'LifecycleEngine | None' = None):
        if engine is not None:
            self.engine = engine
        if self.engine is None:
            raise TypeError(f"{type(self).__name__} has no LifecycleEngine configured")
        if self.engine.config.strict_bindings:
            verify_owner(self.engine.registry, self, self.lifecycles)

    def run_callbacks(self, name: str, body: Callable[[], Any]) -> Any:
        """Run lifecycle ``name`` around ``body`` with this object as owner."""
        return self.engine.run(name, body, owner=self)

    def run_callbacks_detailed(self, name: str,
                               body: Callable[[], Any]) -> tuple[Any, 'ExecutionContext']:
        return self.engine.run_detailed(name, body, owner=self)

    async def arun_callbacks(self, name: str, body: Callable[[], Any]) -> Any:
        return await self.engine.arun(name, body, owner=self)
