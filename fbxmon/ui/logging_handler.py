"""Stderr logging handler — Rich-styled records, stdout left to the collector."""

from __future__ import annotations

import logging
from datetime import datetime

from rich.console import Console
from rich.text import Text

# Level tag + Rich style
_LEVEL_STYLES: dict[int, tuple[str, str]] = {
    logging.DEBUG:    ("DBG", "dim cyan"),
    logging.INFO:     ("INF", "cyan"),
    logging.WARNING:  ("WRN", "yellow"),
    logging.ERROR:    ("ERR", "red"),
    logging.CRITICAL: ("CRT", "bold red"),
}

_QUIET_LOGGERS = ("httpx", "httpcore")


class StderrLogHandler(logging.Handler):
    """Logging handler that prints formatted records to a stderr Console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self._console = console or Console(stderr=True, highlight=False)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._console.print(self._format_record(record))
        except Exception:
            self.handleError(record)

    @staticmethod
    def _format_record(record: logging.LogRecord) -> Text:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        tag, style = _LEVEL_STYLES.get(record.levelno, ("???", ""))
        name = record.name.rsplit(".", 1)[-1]
        msg = record.getMessage()

        text = Text()
        text.append(ts, style="dim")
        text.append(" ")
        text.append(tag, style=style)
        text.append(" ")
        text.append(f"{name}: ", style="dim")
        text.append(msg)
        return text


def setup_logging(level: str | int = logging.WARNING,
                  console: Console | None = None) -> StderrLogHandler:
    """Install a single :class:`StderrLogHandler` on the root logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, StderrLogHandler):
            root.removeHandler(h)

    handler = StderrLogHandler(console)
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return handler
