"""Per-invocation context and profiling."""

from .execution_context import ExecutionContext
from .profiler import HookProfiler

__all__ = ['ExecutionContext', 'HookProfiler']
