"""Structured Logging — JSON formatter and setup for host applications.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, code_point) surfaced when present
    - Nothing is configured on import; the host calls setup_logging/configure_logging

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging, full control of the shape
    - Handlers attach to the "whatwg_infra" logger, not root: a library must
      not reconfigure its host's logging
"""

import json
import logging
from datetime import datetime, timezone

from whatwg_infra.config import Settings, get_settings

LOGGER_NAME = "whatwg_infra"
HANDLER_NAME = "whatwg_infra.stream"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("error_code", "code_point"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def _resolve_level(level: int | str) -> int:
    """Numeric level for an int or a registered level name; WARNING otherwise."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: int | str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Attach a stream handler to the package logger. Returns the handler.

    Repeated calls replace the handler installed by the previous call.
    """
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger = logging.getLogger(LOGGER_NAME)
    for previous in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(previous)
        previous.close()
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """setup_logging driven by Settings (environment when not given)."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
