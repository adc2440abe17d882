from __future__ import annotations

from .LogManager import (
    ROOT_LOGGER,
    LaravelStyleLogger,
    LaravelFormatter,
    JsonFormatter,
    LogContext,
    configure_logging,
    get_logger,
    make_formatter,
)

__all__ = [
    'ROOT_LOGGER',
    'LaravelStyleLogger',
    'LaravelFormatter',
    'JsonFormatter',
    'LogContext',
    'configure_logging',
    'get_logger',
    'make_formatter',
]
