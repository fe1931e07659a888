"""
Logging configuration.

Plain text logs for local use, one JSON object per line when
AGEBMI_LOG_FORMAT=json.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from agebmi.config import get_config


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data)


def setup_logging(level: str | None = None, stream=None) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Overrides AGEBMI_LOG_LEVEL when given
        stream: Output stream (defaults to stdout)

    Returns:
        The configured root logger
    """
    config = get_config()
    log_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)

    if config.log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
