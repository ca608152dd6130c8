"""Profiler for hook and body calls."""

from __future__ import annotations

import time
from collections import defaultdict
from contextlib import contextmanager

from rich.markup import escape

from console import LCConsole


class HookProfiler:
    """Wall-clock timer for hook targets and bodies.

    Disabled profilers cost one branch per section. Timings accumulate
    across invocations until reset().

    Usage::

        profiler = HookProfiler(enabled=True)
        with profiler.section("execute/before:valid"):
            ...
        profiler.report()  # prints timing summary
    """

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self._timings: dict[str, list[float]] = defaultdict(list)

    @contextmanager
    def section(self, name: str):
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            self._timings[name].append(time.perf_counter() - start)

    def summary(self) -> dict[str, dict[str, float]]:
        """Dict of section_name -> {count, total_ms, mean_ms}."""
        summary = {}
        for name, times in sorted(self._timings.items()):
            total = sum(times) * 1000
            count = len(times)
            summary[name] = {'count': count, 'total_ms': total, 'mean_ms': total / count}
        return summary

    def report(self) -> dict[str, dict[str, float]]:
        """Return and print timing summary."""
        console = LCConsole()
        summary = self.summary()
        for name, stats in summary.items():
            console.print(
                f"  [label]{escape(name)}:[/label] {stats['count']}x, "
                f"total [metric.value]{stats['total_ms']:.3f}ms[/metric.value], "
                f"mean [metric.value]{stats['mean_ms']:.3f}ms[/metric.value]"
            )
        return summary

    def reset(self):
        self._timings.clear()
