"""Logging for translation runs.

Three output modes share one logger hierarchy rooted at "tsdiagram":
- human: [LEVEL] message (level colored on a TTY)
- verbose: [LEVEL][HH:MM:SS] message
- json: one object per line, {"level", "ts", "msg"} plus structured fields

Diagnostics are logged with TsDiagramLogger.structured(), which attaches the
diagnostic kind, entity and file to the record. The JSON formatter emits
them as fields; the text formatters append the source file when present.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

ROOT_LOGGER = "tsdiagram"

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31m",
}


class LogMode(Enum):
    """Logging output mode."""

    HUMAN = "human"
    VERBOSE = "verbose"
    JSON = "json"


def _structured_data(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "extra_data", None) or {}


class HumanFormatter(logging.Formatter):
    """Plain text formatter: [LEVEL] message."""

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def level_tag(self, record: logging.LogRecord) -> str:
        tag = f"[{record.levelname}]"
        if self.use_colors:
            return f"{LEVEL_COLORS.get(record.levelno, RESET)}{tag}{RESET}"
        return tag

    def prefix(self, record: logging.LogRecord) -> str:
        return self.level_tag(record)

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        message = record.getMessage()
        file_name = _structured_data(record).get("file")
        if file_name:
            message = f"{message} ({file_name})"
        return f"{self.prefix(record)} {message}"


class VerboseFormatter(HumanFormatter):
    """Text formatter with wall-clock time: [LEVEL][HH:MM:SS] message."""

    def prefix(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        return f"{self.level_tag(record)}[{timestamp}]"


class JSONFormatter(logging.Formatter):
    """JSON lines formatter.

    Format: {"level":"WARNING","ts":"2026-01-31T19:45:23+00:00","msg":"...","kind":"..."}
    Structured fields with a None value are left out.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "msg": record.getMessage(),
        }
        entry.update(
            {key: value for key, value in _structured_data(record).items() if value is not None}
        )
        return json.dumps(entry)


class TsDiagramLogger(logging.Logger):
    """Logger with structured logging support."""

    def structured(self, level: int, msg: str, **data: Any) -> None:
        """Log a message carrying structured fields.

        Args:
            level: Log level
            msg: Log message
            **data: Fields for JSON output (e.g. kind, entity, file)
        """
        if self.isEnabledFor(level):
            self._log(level, msg, (), extra={"extra_data": data}, stacklevel=2)


logging.setLoggerClass(TsDiagramLogger)


def get_logger(name: str = ROOT_LOGGER) -> TsDiagramLogger:
    """Get a tsdiagram logger.

    Args:
        name: Logger name, normally a module's __name__

    Returns:
        TsDiagramLogger instance
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def _formatter(mode: LogMode, use_colors: bool) -> logging.Formatter:
    if mode == LogMode.JSON:
        return JSONFormatter()
    if mode == LogMode.VERBOSE:
        return VerboseFormatter(use_colors=use_colors)
    return HumanFormatter(use_colors=use_colors)


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Configure the tsdiagram logger hierarchy.

    Replaces any handler installed by an earlier call.

    Args:
        mode: Output mode (human, verbose, json)
        level: Minimum log level
        stream: Output stream (default: stderr)
    """
    stream = stream or sys.stderr
    use_colors = hasattr(stream, "isatty") and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(_formatter(mode, use_colors))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)


def configure_from_flags(
    verbose: bool = False,
    quiet: bool = False,
    json_output: bool = False,
) -> None:
    """Configure logging from boolean switches.

    Args:
        verbose: Timestamps and debug traces
        quiet: Warnings and errors only (wins over verbose for the level)
        json_output: Emit JSON lines
    """
    if json_output:
        mode = LogMode.JSON
    elif verbose:
        mode = LogMode.VERBOSE
    else:
        mode = LogMode.HUMAN

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    setup_logging(mode=mode, level=level)
