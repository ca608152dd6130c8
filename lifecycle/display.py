"""Lifecycle display functions.

Rich tables describing registered lifecycles, printed through LCConsole.
"""

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from console import LCConsole

from .hooks.registry import HookRegistry


def build_lifecycle_table(registry: HookRegistry, name: str) -> Table:
    """Table of a lifecycle's hooks in ordinal (execution) order."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="table.header", padding=(0, 1))
    table.add_column("#", style="detail", justify="right")
    table.add_column("Kind")
    table.add_column("Target", style="hook.name")
    table.add_column("Binding", style="detail")
    table.add_column("Conditions", style="detail")

    for row in registry.describe(name):
        kind = row['kind'].lower()
        conditions = [f"if {c}" for c in row['if']] + [f"unless {c}" for c in row['unless']]
        table.add_row(
            str(row['ordinal']),
            f"[hook.{kind}]{row['kind']}[/hook.{kind}]",
            escape(row['target']),
            row['binding'],
            escape(", ".join(conditions)),
        )
    return table


def print_lifecycle(registry: HookRegistry, name: str):
    """Render one lifecycle as a titled panel."""
    console = LCConsole()
    phase_set = registry.lifecycle(name)
    if not registry.all_hooks(name):
        console.print(f"[detail]{escape(name)}: no hooks registered[/detail]")
        return
    subtitle = f"[detail]{phase_set.abort_policy.name}"
    if phase_set.terminator is not None:
        terminator = getattr(phase_set.terminator, '__name__', 'custom')
        subtitle += f" · terminator {terminator}"
    subtitle += "[/detail]"
    console.print(Panel(
        build_lifecycle_table(registry, name),
        title=f"[lifecycle.name]{escape(name)}[/lifecycle.name]",
        subtitle=subtitle,
        border_style="detail",
    ))


def print_registry(registry: HookRegistry):
    """Render every lifecycle in definition order."""
    for name in registry.lifecycle_names():
        print_lifecycle(registry, name)
