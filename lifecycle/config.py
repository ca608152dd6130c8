"""Engine configuration dataclass."""

from dataclasses import dataclass

from .hooks.hook_point import AbortPolicy


@dataclass
class EngineConfig:
    """Knobs for LifecycleEngine and the registries it creates."""
    trace_hooks: bool = False        # print each hook call and state change
    profile_hooks: bool = False      # time each hook and body call
    strict_bindings: bool = True     # Hookable checks late bindings at construction
    default_policy: AbortPolicy = AbortPolicy.NONE

    def __post_init__(self):
        self.default_policy = AbortPolicy.coerce(self.default_policy)
        for flag in ('trace_hooks', 'profile_hooks', 'strict_bindings'):
            if not isinstance(getattr(self, flag), bool):
                raise ValueError(
                    f"{flag} must be a bool, got {getattr(self, flag)!r}"
                )
