from __future__ import annotations
import os
from pathlib import Path

from lispy.errors import LispyConfigError

# Defaults
_DEFAULT_PROMPT = "lispy> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"
_DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Path:
    raw = os.environ.get("LISPY_HISTORY_FILE")
    if not raw:
        return _DEFAULT_HISTORY_FILE
    return Path(raw.strip()).expanduser()


def get_log_level() -> str:
    return validate_log_level(os.environ.get("LISPY_LOG_LEVEL", _DEFAULT_LOG_LEVEL))


def validate_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise LispyConfigError(
            f"LISPY_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    return level
