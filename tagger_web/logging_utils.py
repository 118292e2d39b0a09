"""Logging utilities for the tag suggestion web service.

Provides structured JSONL logging for API interactions.
"""

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

__all__ = ["log_interaction", "get_log_file", "LOG_DIR"]

logger = logging.getLogger(__name__)

LOG_DIR = Path(os.getenv("TAGGER_WEB_LOG_DIR", str(Path(__file__).parent / "logs")))


def get_log_file() -> Path:
    """Path of today's interaction log."""
    return LOG_DIR / f"api_interactions_{datetime.now().strftime('%Y%m%d')}.jsonl"


def log_interaction(event_type: str, data: Dict[str, Any]) -> None:
    """Log an API interaction to a structured JSONL file.

    A failed write is reported as a warning and never fails the request.
    Lone surrogates (legal in JSON request bodies and model output) are
    written as ``\\uXXXX`` escapes.

    Args:
        event_type: Type of event (suggest_tags_request, suggest_tags_result, validation_error, etc.)
        data: Event-specific data to log
    """
    log_entry = {"timestamp": datetime.now().isoformat(), "event_type": event_type, **data}
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        with open(get_log_file(), "a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
    except (OSError, UnicodeError) as e:
        logger.warning("Could not write %s interaction log: %s", event_type, e)
