from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO, Union

from ..config import settings

LogContext = Dict[str, Union[str, int, float, bool, None]]


class LaravelFormatter(logging.Formatter):
    """Laravel-style log formatter."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        log_line = f"[{timestamp}] {record.name}.{record.levelname}: {record.getMessage()}"
        
        context = getattr(record, 'context', {})
        if context:
            log_line += f" {json.dumps(context, default=str)}"
        
        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"
        
        return log_line


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'channel': record.name,
            'message': record.getMessage(),
            'context': getattr(record, 'context', {}),
        }
        
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)
        
        return json.dumps(log_entry, default=str)


def make_formatter(name: str) -> logging.Formatter:
    """Build the formatter registered under a settings name."""
    if name == 'json':
        return JsonFormatter()
    return LaravelFormatter()


ROOT_LOGGER = 'keyed_collection'

# Silent unless the application configures logging
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    level: Optional[Union[str, int]] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a stream handler to the library's root logger.

    Calling it again replaces the handler added by the previous call.
    Level and format default to the values in settings.
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, '_keyed_collection', False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(make_formatter(log_format or settings.LOG_FORMAT))
    setattr(handler, '_keyed_collection', True)
    root.addHandler(handler)

    if level is None:
        level = settings.log_level_number
    elif isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
    return handler


class LaravelStyleLogger:
    """Laravel-style logger implementation."""
    
    def __init__(self, name: str = ROOT_LOGGER) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
    
    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, context)
    
    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log info message."""
        self._log(logging.INFO, message, context)
    
    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, context)
    
    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, context)
    
    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
    
    def _log(self, level: int, message: str, context: Optional[LogContext] = None) -> None:
        extra = {'context': context} if context else {}
        self.logger.log(level, message, extra=extra)


_loggers: Dict[str, LaravelStyleLogger] = {}


def get_logger(name: Optional[str] = None) -> LaravelStyleLogger:
    """Get a Laravel-style logger instance."""
    if name is None:
        name = ROOT_LOGGER
    if name not in _loggers:
        _loggers[name] = LaravelStyleLogger(name)
    return _loggers[name]
