"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from lispy.config import get_log_level, validate_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED = False


def _stderr_sink(message) -> None:
    # Resolve sys.stderr per message so redirected streams are honoured
    sys.stderr.write(message)


def configure_logging(level: str | None = None) -> None:
    """Configure process-level logging once.

    The level comes from `level` or, when omitted, from LISPY_LOG_LEVEL.
    Logs go to stderr so they never mix with printed results. An invalid level
    raises LispyConfigError even after the first call.
    """
    global _CONFIGURED
    resolved = validate_log_level(level) if level else get_log_level()
    if _CONFIGURED:
        return

    logger.remove()
    logger.add(
        _stderr_sink,
        level=resolved,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("lispy")
    _CONFIGURED = True
