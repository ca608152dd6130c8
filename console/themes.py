from rich.style import Style
from rich.theme import Theme


class LCTheme(Theme):
    """
    Dark palette for lifecycle engine output.

    Maps the style names used across the engine (hook kinds, states,
    notification levels, table labels) onto a small fixed set of colors,
    so call sites only ever refer to semantic names like ``hook.before``
    or ``state.aborted``.
    """
    BLUE = '#61AFEF'
    CYAN = '#56B6C2'
    GREEN = '#98C379'
    YELLOW = '#E5C07B'
    RED = '#E06C75'
    ORANGE = '#D19A66'
    MED_GREY = '#8A8F98'
    LAVENDER = '#B87FD9'
    MAGENTA = '#BE50AE'

    def __init__(self):
        super().__init__({
            # Basic colors
            "blue": Style(color=self.BLUE),
            "cyan": Style(color=self.CYAN),
            "green": Style(color=self.GREEN),
            "yellow": Style(color=self.YELLOW),
            "red": Style(color=self.RED),
            "orange": Style(color=self.ORANGE),
            "med_grey": Style(color=self.MED_GREY),
            "lavender": Style(color=self.LAVENDER),
            "magenta": Style(color=self.MAGENTA),

            # Notification levels
            "time": Style(color=self.MED_GREY, dim=True),
            "notification.content": Style(color=self.BLUE),
            "info.content": Style(color=self.CYAN),
            "success": Style(color=self.GREEN, bold=True),
            "warning.content": Style(color=self.YELLOW),
            "warning.icon": Style(color=self.YELLOW, bold=True),
            "error.content": Style(color=self.RED),
            "error.icon": Style(color=self.RED, bold=True),
            "rule.text": Style(color=self.LAVENDER, bold=True),
            "rule.line": Style(color=self.ORANGE),

            # Engine
            "lifecycle.name": Style(color=self.LAVENDER, bold=True),
            "hook.name": Style(color=self.CYAN, bold=True),
            "hook.before": Style(color=self.BLUE),
            "hook.after": Style(color=self.GREEN),
            "hook.around": Style(color=self.MAGENTA),
            "state": Style(color=self.MED_GREY),
            "state.aborted": Style(color=self.RED, bold=True),
            "detail": Style(color=self.MED_GREY, italic=True),
            "label": Style(color=self.LAVENDER),
            "metric.value": Style(color=self.YELLOW),
            "table.header": Style(color=self.LAVENDER, bold=True),
        })
