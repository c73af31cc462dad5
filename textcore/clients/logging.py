"""Structured logging utilities."""

import json
import logging
from typing import Any, Dict, Optional

_RESERVED_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info", "taskName",
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Thai text stays readable in the output
        return json.dumps(log_data, ensure_ascii=False, default=str)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger with JSON formatting configured."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def log_config_load(
    logger: logging.Logger,
    source: str,
    duration_ms: int,
    config_version: Optional[str] = None,
) -> None:
    """Log config load stage."""
    extra: Dict[str, Any] = {
        "stage": "config_load",
        "source": source,
        "duration_ms": duration_ms,
    }
    if config_version:
        extra["config_version"] = config_version
    logger.info("Config loaded", extra=extra)


def log_batch(
    logger: logging.Logger,
    stage: str,
    line_count: int,
    kept_count: int,
    duration_ms: int,
    invalid_count: int = 0,
) -> None:
    """Log one batch transform (names or phones)."""
    logger.info(
        f"Batch {stage} completed",
        extra={
            "stage": stage,
            "line_count": line_count,
            "kept_count": kept_count,
            "invalid_count": invalid_count,
            "duration_ms": duration_ms,
        },
    )
