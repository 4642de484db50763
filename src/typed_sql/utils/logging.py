"""Structured logging using structlog.

Provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering
- Redaction of credentials (passwords, tokens, database URLs)
- Context binding support
- Dual output (stdout + optional daily rotating file)

Configuration comes from typed_sql.config.settings:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL. Default: INFO
- LOG_TO_FILE: Enable file logging. Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from typed_sql.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("sql.prepared", placeholder_count=3)
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping, Tuple

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from typed_sql.config import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r".*database_(url|uri)$", re.IGNORECASE),
    re.compile(r"^dsn$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Args:
        data: Dictionary that may contain credentials

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"database_password": "x", "driver": "mysql"})
        {'database_password': '[REDACTED]', 'driver': 'mysql'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor applying sanitize_for_logging to every event."""
    return sanitize_for_logging(dict(event_dict))


def _load_log_config() -> Tuple[int, bool, Path]:
    """Read level and file options from settings, or the raw environment.

    Falls back to environment variables when settings fail validation so
    that a misconfigured driver or prefix can still be logged.
    """
    try:
        settings = get_settings()
        level_name = settings.LOG_LEVEL
        to_file = settings.LOG_TO_FILE
        log_dir = settings.LOG_FILE_DIR
    except ValidationError:
        level_name = os.getenv("LOG_LEVEL", "INFO")
        to_file = os.getenv("LOG_TO_FILE", "").lower() in ("1", "true", "yes")
        log_dir = os.getenv("LOG_FILE_DIR", "logs")

    return getattr(logging, level_name.upper(), logging.INFO), to_file, Path(log_dir)


def _get_log_file_path(log_dir: Path) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"typed-sql-{date_str}.log"


def _configure_structlog() -> None:
    """Configure stdlib handlers and the structlog processor chain."""
    level, to_file, log_dir = _load_log_config()

    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if to_file:
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path(log_dir)),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(driver="pgsql", command="prepare")
        >>> logger.info("sql.prepared", placeholder_count=2)
    """
    return structlog.get_logger().bind(**kwargs)
