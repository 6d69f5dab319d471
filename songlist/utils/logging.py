"""
Console logging for the shuffler.
Outputs JSON lines in production, arrow-prefixed narration otherwise.
"""
import logging
import sys
from typing import Optional

import json_log_formatter

from songlist.config.settings import Settings, settings

ARROW = "==>"
_GREEN = "\x1b[32m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"


class JsonFormatter(json_log_formatter.JSONFormatter):
    """JSON lines carrying the level and logger name next to the message."""

    def json_record(self, message: str, extra: dict, record: logging.LogRecord) -> dict:
        extra = super().json_record(message, extra, record)
        extra["level"] = record.levelname
        extra["logger"] = record.name
        return extra


class ArrowFormatter(logging.Formatter):
    """Prefix each message with a green arrow and render it in bold."""

    def __init__(self, color: bool = True):
        super().__init__()
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self._color:
            return f"{ARROW} {message}"
        return f"{_GREEN}{ARROW}{_RESET} {_BOLD}{message}{_RESET}"


def setup_logging(level: Optional[str] = None, config: Optional[Settings] = None) -> None:
    if config is None:
        config = settings

    root_logger = logging.getLogger()
    level = level or config.LOG_LEVEL
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)

    if config.is_production:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(ArrowFormatter(color=not config.NO_COLOR))

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
