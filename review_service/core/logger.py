"""
Centralized logging configuration for the Review Service.

Provides a structured logging interface with:
- Correlation IDs taken from the current request context
- JSON output for production and colored console output for development
- Optional file logging (always JSON)
- Structured metadata on every entry
"""

import json
import logging
import os
import sys
from datetime import datetime, UTC
from typing import Any, Dict, Optional, Union

from review_service.core.config import config
from review_service.middleware.correlation_id import get_correlation_id

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_RECORD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName',
}


class StructuredLogger:
    """
    Logger with structured entries and correlation ID support.
    """

    def __init__(self):
        self.service_name = config.service_name
        self.environment = config.environment
        self.log_level = getattr(logging, config.log_level.upper(), logging.INFO)
        self._logger = logging.getLogger(self.service_name)
        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging with handlers"""
        self._logger.handlers.clear()
        self._logger.setLevel(self.log_level)
        self._logger.propagate = False

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.log_level)

            if config.log_format == "json":
                console_handler.setFormatter(JSONFormatter())
            else:
                console_handler.setFormatter(ConsoleFormatter())

            self._logger.addHandler(console_handler)

        if config.log_to_file:
            log_dir = os.path.dirname(config.log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(config.log_file_path)
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(JSONFormatter())  # Always JSON for files

            self._logger.addHandler(file_handler)

    def _build_log_entry(
        self,
        level: str,
        message: str,
        correlation_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """Build structured log entry"""
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level.upper(),
            "service": self.service_name,
            "environment": self.environment,
            "message": message,
            "correlationId": correlation_id or get_correlation_id(),
        }

        if metadata:
            entry["metadata"] = metadata

        entry.update(kwargs)

        return entry

    def _log(
        self,
        level: str,
        message: str,
        correlation_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Internal logging method"""
        log_entry = self._build_log_entry(level, message, correlation_id, metadata, **kwargs)

        # Don't pass 'message' in extra to avoid conflict with LogRecord
        extra_data = {k: v for k, v in log_entry.items() if k != 'message'}
        self._logger.log(getattr(logging, level.upper()), message, extra=extra_data)

    @staticmethod
    def _with_error(metadata: Optional[Dict[str, Any]], error: Optional[Union[str, Exception]]):
        if metadata is None:
            metadata = {}

        if error:
            if isinstance(error, Exception):
                metadata["error"] = {
                    "type": type(error).__name__,
                    "message": str(error),
                }
            else:
                metadata["error"] = {"message": str(error)}

        return metadata

    def info(self, message: str, correlation_id: Optional[str] = None,
             metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Info level logging"""
        self._log("INFO", message, correlation_id, metadata, **kwargs)

    def warning(self, message: str, correlation_id: Optional[str] = None,
                metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Warning level logging"""
        self._log("WARNING", message, correlation_id, metadata, **kwargs)

    def error(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Error level logging"""
        metadata = self._with_error(metadata, error)
        self._log("ERROR", message, correlation_id, metadata, **kwargs)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "service": config.service_name,
            "message": record.getMessage(),
        }

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        correlation_id = getattr(record, "correlationId", None)
        suffix = f" [{correlation_id}]" if correlation_id else ""

        return f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}{suffix}"


# Create and export the logger instance
logger = StructuredLogger()
