from dataclasses import dataclass
from enum import Enum


class TimeFormat(Enum):
    """Time display format options for console timestamps."""
    DEFAULT = "%I:%M:%S %p"              # 12-hour with AM/PM
    TWENTY_FOUR_HOUR = "%H:%M:%S"        # 24-hour with seconds
    ISO = "%Y-%m-%dT%H:%M:%S"            # sortable, for log files


class ConsoleMode(Enum):
    """Console operation mode."""
    NORMAL = "normal"   # Standard Rich console output
    LOGGING = "logging" # Output to log file only
    NULL = "null"       # No output at all


@dataclass
class ConsoleConfig:
    """
    Configuration for the LCConsole output system.

    :ivar mode: The operating mode for the console (NORMAL, LOGGING, NULL).
    :ivar use_colors: Whether to use colored output.
    :ivar show_time: Whether to prefix messages with a timestamp.
    :ivar time_format: Format for timestamp display.
    :ivar timezone: Timezone for timestamp display (e.g., "UTC", "America/New_York").
    :ivar log_file: Path to log file when using LOGGING mode.
    """
    mode: ConsoleMode = ConsoleMode.NORMAL
    use_colors: bool = True
    show_time: bool = False
    time_format: TimeFormat = TimeFormat.TWENTY_FOUR_HOUR
    timezone: str = "UTC"
    log_file: str | None = None
