"""Hook system infrastructure: records, signals, registry, and binding.

Provides the lifecycle/hook records, the abort signals, the HookRegistry
that stores ordered hooks per lifecycle, the adapter that binds targets
to behaviour, and the Hookable base class for late-binding owners.
"""

from .hook_point import HookKind, AbortPolicy, RunState, PhaseSet, HookDescriptor
from .signals import ABORT, ABORTED, Abort, halts_on_false, is_abort_signal
from .registry import HookRegistry
from .adapter import resolve, should_run, verify_owner
from .hookable import Hookable

__all__ = [
    'HookKind',
    'AbortPolicy',
    'RunState',
    'PhaseSet',
    'HookDescriptor',
    'ABORT',
    'ABORTED',
    'Abort',
    'halts_on_false',
    'is_abort_signal',
    'HookRegistry',
    'resolve',
    'should_run',
    'verify_owner',
    'Hookable',
]
