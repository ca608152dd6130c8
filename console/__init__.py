from .config import ConsoleConfig, ConsoleMode, TimeFormat
from .themes import LCTheme
from .utils import apply_style, header, success, error, warning, info, emphasis, subtle
from .lcconsole import LCConsole

__all__ = [
    "LCConsole",
    "ConsoleConfig",
    "ConsoleMode",
    "TimeFormat",
    "LCTheme",
    "apply_style",
    "header",
    "success",
    "error",
    "warning",
    "info",
    "emphasis",
    "subtle",
]
