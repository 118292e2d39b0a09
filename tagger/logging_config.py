"""Logging configuration for tag suggestion.

Console output is human-readable; the optional file output is JSONL, one
event per line, in ``logs/tagger_YYYYMMDD.jsonl``.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = [
    "setup_logging",
    "get_logger",
    "log_tag_event",
    "LOG_DIR",
]

LOG_DIR = Path(__file__).parent.parent / "logs"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONLFormatter(logging.Formatter):
    """Render a record as a single JSON object.

    Fields attached by :func:`log_tag_event` (``event_type`` and the event
    data) are merged into the top level of the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event_type = getattr(record, "event_type", None)
        if event_type:
            entry["event_type"] = event_type
        entry.update(getattr(record, "event_data", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ColoredConsoleHandler(logging.StreamHandler):
    """Console handler with colored level names on a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color and getattr(self.stream, "isatty", lambda: False)():
            text = text.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)
        return text


def get_log_file(log_dir: Optional[Path] = None) -> Path:
    """Path of today's JSONL event log."""
    return (log_dir or LOG_DIR) / f"tagger_{datetime.now().strftime('%Y%m%d')}.jsonl"


def setup_logging(
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Set up logging for the tagger package.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level (default: INFO)
        log_to_file: Whether to append JSONL events to today's log file
        log_to_console: Whether to log to stderr
        log_dir: Custom log directory (default: project logs/)

    Returns:
        The ``tagger`` logger
    """
    logger = logging.getLogger("tagger")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_console:
        console_handler = ColoredConsoleHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    if log_to_file:
        log_file = get_log_file(log_dir)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Lone surrogates from model output are written as \uXXXX escapes
        file_handler = logging.FileHandler(log_file, encoding="utf-8", errors="backslashreplace")
        file_handler.setFormatter(JSONLFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "tagger") -> logging.Logger:
    """Get a logger under the ``tagger`` namespace."""
    if name == "tagger" or name.startswith("tagger."):
        return logging.getLogger(name)
    return logging.getLogger(f"tagger.{name}")


def log_tag_event(
    event_type: str,
    data: Dict[str, Any],
    level: int = logging.INFO,
    logger_name: str = "tagger",
) -> None:
    """Log a structured tag suggestion event.

    Args:
        event_type: Type of event (e.g., 'model_request', 'model_response', 'fallback')
        data: Event-specific data; a 'message' key becomes the log message
        level: Log level
        logger_name: Logger to use
    """
    event_data = {k: v for k, v in data.items() if k != "message"}
    get_logger(logger_name).log(
        level,
        data.get("message", event_type),
        extra={"event_type": event_type, "event_data": event_data},
    )
