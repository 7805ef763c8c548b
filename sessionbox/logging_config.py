"""
Custom logging configuration that keeps session ids out of the logs
"""

import logging
import logging.config
import re
from typing import Dict, Any

SESSION_ID_PATTERN = re.compile(r"(session_id=)([^\s,;]+)")


class SessionIdFilter(logging.Filter):
    """Filter to mask session ids in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace `session_id=<id>` with a masked id, keeping the record."""
        message = record.getMessage()
        if "session_id=" in message:
            record.msg = SESSION_ID_PATTERN.sub(_mask, message)
            record.args = None
        return True


def _mask(match: "re.Match[str]") -> str:
    session_id = match.group(2)
    return f"{match.group(1)}{session_id[:4]}***"


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with session id masking."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "session_id_filter": {
                "()": SessionIdFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["session_id_filter"]
            }
        },
        "loggers": {
            "sessionbox": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def setup_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
