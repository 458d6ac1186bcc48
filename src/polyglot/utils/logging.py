"""Logging for polyglot.

Everything logs under the ``polyglot`` logger. Modules attach key-value
context to a record with ``log_with_context`` and both formatters render
it: as extra JSON keys, or as ``[key=value ...]`` after the message.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from polyglot.exceptions import ConfigError

ROOT_LOGGER = "polyglot"

_LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _context(record: logging.LogRecord) -> dict[str, Any]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class JSONFormatter(logging.Formatter):
    """One JSON object per record; used for log files."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """``LEVEL    logger: message [key=value ...]`` for stderr."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8}"
        if self.use_color and record.levelname in _LEVEL_COLORS:
            level = f"{_LEVEL_COLORS[record.levelname]}{level}{_RESET}"

        line = f"{level} {record.name}: {record.getMessage()}"

        context = _context(record)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line = f"{line} [{pairs}]"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    json_format: bool = False,
    use_color: bool = True,
) -> logging.Logger:
    """Send polyglot's logs to stderr and optionally to a JSON log file.

    Calling it again replaces the handlers installed by the previous call.
    Unknown level names fall back to WARNING.

    Args:
        level: Level name such as "INFO" (case-insensitive).
        log_file: Also append JSON lines to this file.
        json_format: Write JSON to stderr instead of the console format.
        use_color: Color the level name on stderr.

    Returns:
        The ``polyglot`` logger.

    Raises:
        ConfigError: If the log file cannot be created.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(numeric_level)
    root.propagate = False

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        JSONFormatter() if json_format else ConsoleFormatter(use_color=use_color)
    )
    root.addHandler(stderr_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot open log file {log_file}: {e}") from e
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; pass ``__name__`` so it sits under ``polyglot``."""
    return logging.getLogger(name)


def log_with_context(
    log: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log ``message`` with key-value context attached to the record."""
    log.log(level, message, extra={"context": context})
