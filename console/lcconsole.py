import sys
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from rich.console import Console, RenderableType
from rich.style import Style

from .config import ConsoleConfig, ConsoleMode
from .utils import apply_style
from .themes import LCTheme


class LCConsole:
    """
    The `LCConsole` class is the single output channel for the lifecycle engine. It wraps a
    Rich `Console` and routes every message through one of three modes: NORMAL (styled terminal
    output), LOGGING (plain text appended to a log file), or NULL (no output at all).

    The console is a singleton. The first construction fixes the configuration; constructing it
    again with a *different* `ConsoleConfig` re-initializes the instance, which is how tests
    silence output and how applications redirect it to a file.

    :ivar _instance: Singleton instance of the `LCConsole` class.
    :vartype _instance: LCConsole
    :ivar _console: The Rich console object that performs the actual rendering.
    :vartype _console: Console | None
    :ivar _cfg: Configuration for the console behavior and attributes.
    :vartype _cfg: ConsoleConfig | None
    :ivar _log_file_handle: Opened file handle for logging mode, if applicable.
    :vartype _log_file_handle: Any | None
    :ivar _mode: The operating mode for the console.
    :vartype _mode: ConsoleMode | None
    :ivar _tz_info: Timezone used for timestamps.
    :vartype _tz_info: ZoneInfo | None
    """
    _instance = None
    _console: Console|None = None
    _cfg: ConsoleConfig|None = None
    _log_file_handle: Any|None = None
    _mode: ConsoleMode|None = None
    _tz_info: ZoneInfo|None = None

    def __new__(cls, cfg: ConsoleConfig|None = None):
        """
        Creates or returns the singleton instance, re-initializing it when a different
        configuration is supplied.

        :param cfg: Optional configuration object. When None, an existing instance is returned
            unchanged, or a new one is created with default settings.
        :returns: The globally unique console instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize(cfg)
        elif cfg is not None and cls._instance._cfg != cfg:
            cls._instance._initialize(cfg)
        return cls._instance

    def _initialize(self, cfg: ConsoleConfig|None = None):
        """
        Builds the underlying Rich console for the configured mode.

        :param cfg: Console configuration. Defaults to `ConsoleConfig()`.
        :raises ValueError: When LOGGING mode is used without a `log_file`, or the mode is unknown.
        :raises RuntimeError: When the log file cannot be opened.
        """
        if self._log_file_handle:
            self._log_file_handle.close()
            self._log_file_handle = None

        self._cfg = cfg if cfg is not None else ConsoleConfig()
        self._mode = self._cfg.mode
        self._tz_info = ZoneInfo(self._cfg.timezone) if self._cfg.timezone else None

        theme = LCTheme()

        if self._mode == ConsoleMode.NULL:
            self._console = Console(quiet=True)

        elif self._mode == ConsoleMode.LOGGING:
            if not self._cfg.log_file:
                raise ValueError("log_file must be specified in ConsoleConfig for logging mode")
            try:
                self._log_file_handle = open(self._cfg.log_file, "a+", encoding="utf-8")
            except OSError as e:
                raise RuntimeError(f"Failed to open log file {self._cfg.log_file}: {e}") from e
            self._console = Console(
                file=self._log_file_handle,
                theme=theme,
                force_terminal=False,
                no_color=True,
                width=120,
            )

        elif self._mode == ConsoleMode.NORMAL:
            self._console = Console(
                theme=theme,
                file=sys.stderr,
                no_color=not self._cfg.use_colors,
                highlight=False,
            )

        else:
            raise ValueError(f"Unsupported console mode: {self._mode}")

    def _should_do_print(self) -> bool:
        return self._mode != ConsoleMode.NULL

    def print(self, content: str|RenderableType = "", style: str|Style = ""):
        """
        Prints markup text or any Rich renderable.

        :param content: Markup string or renderable (Table, Panel, ...).
        :param style: Optional style applied to the whole output.
        """
        if not self._should_do_print():
            return
        if isinstance(content, str):
            content = self._with_time(content)
        self._console.print(content, style=style or None)
        self._flush()

    def print_notification(self, content: str):
        self.print(apply_style(content, "notification.content"))

    def print_info(self, content: str):
        self.print(apply_style(content, "info.content"))

    def print_success(self, content: str):
        self.print(apply_style(content, "success"))

    def print_warning(self, content: str):
        """
        Prints a warning, prefixed with a warning marker.

        :param content: The warning message.
        """
        self.print(f"{apply_style('!', 'warning.icon')} {apply_style(content, 'warning.content')}")

    def print_error(self, content: str):
        """
        Prints an error, prefixed with an error marker.

        :param content: The error message.
        """
        self.print(f"{apply_style('x', 'error.icon')} {apply_style(content, 'error.content')}")

    def rule(self, content: str = "", style: str|Style = "rule.line"):
        if not self._should_do_print():
            return
        self._console.rule(apply_style(content, "rule.text") if content else "", style=style)
        self._flush()

    def handle_exception(self, show_locals: bool = False):
        if not self._should_do_print():
            return
        self._console.print_exception(show_locals=show_locals)
        self._flush()

    def get_console_config(self) -> ConsoleConfig:
        return self._cfg

    def get_tz_info(self) -> ZoneInfo|None:
        return self._tz_info

    def _with_time(self, text: str) -> str:
        if not self._cfg.show_time:
            return text
        stamp = datetime.now(self._tz_info).strftime(self._cfg.time_format.value)
        return f"{apply_style(stamp, 'time')} {text}"

    def _flush(self):
        if self._log_file_handle is not None:
            self._log_file_handle.flush()
