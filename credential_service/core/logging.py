import logging
from datetime import datetime, UTC
from typing import Any, Dict
from pythonjsonlogger.jsonlogger import JsonFormatter
from credential_service.core.config import settings

LOGGER_NAMES = [
    "auth.service",
    "auth.jwt",
]

class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter for logs."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        # Add timestamp in ISO format
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["name"] = record.name

        # Add code location
        log_record["function"] = record.funcName
        log_record["module"] = record.module
        log_record["line"] = record.lineno

        # Add environment
        log_record["environment"] = settings.ENVIRONMENT

def _configure(level: str | int, propagate: bool) -> logging.Handler:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(CustomJsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    for logger_name in LOGGER_NAMES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = propagate
        if not propagate:
            logger.addHandler(console_handler)

    return console_handler

def setup_logging() -> None:
    """Configure logging for the application."""
    _configure(settings.LOG_LEVEL.upper(), propagate=False)

def setup_test_logging() -> None:
    """Configure logging for tests with propagation enabled."""
    _configure(logging.INFO, propagate=True)

# Create specific loggers
auth_logger = logging.getLogger("auth.service")
jwt_logger = logging.getLogger("auth.jwt")
