"""Lifecycle hook engine.

Named lifecycles with ordered BEFORE / AROUND / AFTER hooks, abort
signalling, and early- or late-bound hook targets.
"""

from .errors import (
    LifecycleError, DuplicateLifecycleError, UnknownLifecycleError,
    InvalidHookError, HookResolutionError,
)
from .hooks import (
    HookKind, AbortPolicy, RunState, PhaseSet, HookDescriptor,
    ABORT, ABORTED, Abort, halts_on_false,
    HookRegistry, Hookable,
)
from .config import EngineConfig
from .contexts import ExecutionContext, HookProfiler
from .engine import LifecycleEngine
from .registry import Registry, VariantRegistry

__version__ = "0.1.0"

__all__ = [
    'LifecycleError',
    'DuplicateLifecycleError',
    'UnknownLifecycleError',
    'InvalidHookError',
    'HookResolutionError',
    'HookKind',
    'AbortPolicy',
    'RunState',
    'PhaseSet',
    'HookDescriptor',
    'ABORT',
    'ABORTED',
    'Abort',
    'halts_on_false',
    'HookRegistry',
    'Hookable',
    'EngineConfig',
    'ExecutionContext',
    'HookProfiler',
    'LifecycleEngine',
    'Registry',
    'VariantRegistry',
]
