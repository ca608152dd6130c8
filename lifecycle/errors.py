"""Error taxonomy for the lifecycle engine.

Configuration errors (duplicate or unknown lifecycles, malformed hooks)
are raised synchronously at setup time. Failures raised by hook targets
or the body are never wrapped: they propagate through ``run`` unchanged.
"""


class LifecycleError(Exception):
    """Base class for all engine errors."""


class DuplicateLifecycleError(LifecycleError, ValueError):
    """A lifecycle with this name is already defined."""

    def __init__(self, name: str):
        super().__init__(f"Lifecycle '{name}' is already defined")
        self.name = name


class UnknownLifecycleError(LifecycleError, KeyError):
    """The named lifecycle was never defined."""

    def __init__(self, name: str, available: list[str] | None = None):
        message = f"Unknown lifecycle: '{name}'"
        if available is not None:
            message += f". Available: {', '.join(sorted(available)) or '(none)'}"
        super().__init__(message)
        self.name = name

    def __str__(self):
        # KeyError repr()s its argument; keep the plain message
        return self.args[0]


class InvalidHookError(LifecycleError, TypeError):
    """A hook was registered with an unusable kind, target, or condition."""


class HookResolutionError(LifecycleError, AttributeError):
    """A late-bound hook name could not be resolved to a callable."""
