"""
Logging configuration with structured output.

Provides a JSON formatter carrying per-call context (request id, component,
operation, status code, duration) and a small manager that wires handlers
onto the package logger.
"""

import logging
import json
import sys
import traceback
import uuid
from contextvars import ContextVar
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Dict, Any, Optional, List

from .config import settings

PACKAGE_LOGGER = "dionysus"

_request_id_var: ContextVar[Optional[str]] = ContextVar("dionysus_request_id", default=None)


@dataclass
class LogEntry:
    """Structured log entry"""
    timestamp: str
    level: str
    logger_name: str
    message: str
    request_id: Optional[str] = None
    component: Optional[str] = None
    operation: Optional[str] = None
    duration_ms: Optional[float] = None
    status_code: Optional[int] = None
    extra: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        result = asdict(self)
        # Remove None values to reduce log size
        return {k: v for k, v in result.items() if v is not None}


_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        extra = {}
        if self.include_extra:
            extra = {
                key: value for key, value in record.__dict__.items()
                if key not in _RESERVED_ATTRS
            }

        if record.exc_info:
            extra['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        log_entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger_name=record.name,
            message=record.getMessage(),
            request_id=extra.pop('request_id', None) or get_request_id(),
            component=extra.pop('component', None),
            operation=extra.pop('operation', None),
            duration_ms=extra.pop('duration_ms', None),
            status_code=extra.pop('status_code', None),
            extra=extra if extra else None
        )

        return json.dumps(log_entry.to_dict(), ensure_ascii=False, default=str)


class LoggingManager:
    """Centralized logging management for the package logger"""

    def __init__(self):
        self.configured = False
        self.handlers: List[logging.Handler] = []

    def setup_logging(self,
                      log_level: str = "INFO",
                      structured: bool = False,
                      stream=None) -> None:
        """Attach a console handler to the package logger"""
        if self.configured:
            return

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, log_level.upper()))

        handler = logging.StreamHandler(stream or sys.stderr)
        if structured:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                )
            )
        package_logger.addHandler(handler)
        self.handlers.append(handler)

        self.configured = True
        package_logger.debug("Logging system initialized")

    def close(self):
        """Detach and close all handlers"""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in self.handlers:
            package_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()
        self.configured = False


logging_manager = LoggingManager()


def setup_logging(log_level: Optional[str] = None, structured: Optional[bool] = None, stream=None):
    """Setup logging with values from settings unless overridden"""
    logging_manager.setup_logging(
        log_level=log_level or settings.log_level,
        structured=settings.log_structured if structured is None else structured,
        stream=stream
    )


def new_request_id() -> str:
    """Assign a short correlation id to the current call context"""
    request_id = uuid.uuid4().hex[:8]
    _request_id_var.set(request_id)
    return request_id


def get_request_id() -> Optional[str]:
    return _request_id_var.get()
