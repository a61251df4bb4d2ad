"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; this module decides
where those records go. Console commands use Rich, the TUI routes records
into Textual's devtools log so they never draw over the screen.
"""

import logging


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(cls._from_string)

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns WARNING if invalid."""
        return cls._from_string.get(level_str.lower(), cls.WARNING)


def configure_logging(level: str = "warning", tui: bool = False) -> None:
    """Attach a handler to the ``glowchat`` logger.

    Calling it again replaces the previous handler.

    Args:
        level: Level name (debug, info, warning, error)
        tui: Route records to Textual instead of the terminal
    """
    if tui:
        from textual.logging import TextualHandler
        handler: logging.Handler = TextualHandler()
    else:
        from rich.logging import RichHandler
        handler = RichHandler(show_path=False, rich_tracebacks=True)

    root = logging.getLogger("glowchat")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(LogLevel.from_string(level))
    root.propagate = False
