"""
Logging Utilities
=================

Centralized logging configuration, and the bridge forwarding engine messages
to the standard logging system.
"""

import logging
import logging.handlers
import os
import sys
from typing import List, Optional

from ..messages import Level, Message

LEVEL_METHODS = {
    Level.TRACE: 'debug',
    Level.INFORMATION: 'info',
    Level.WARNING: 'warning',
    Level.ERROR: 'error',
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

SIZE_UNITS = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size: str = "10MB",
    backup_count: int = 5
) -> logging.Logger:
    """
    Route log records to stderr, and to a rotating file when one is given.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        log_level: Level name, unknown names fall back to INFO
        log_file: Log file path, its folder is created if needed
        max_file_size: Size before rotation (e.g. '512KB', '10MB')
        backup_count: Number of rotated files to keep

    Returns:
        The confscout logger
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # stdout carries the configuration dump
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or '.', exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_size(max_file_size),
            backupCount=backup_count,
            encoding='utf-8'
        ))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    app_logger = logging.getLogger('confscout')
    app_logger.debug(f"Logging initialized - Level: {logging.getLevelName(numeric_level)}, File: {log_file}")
    return app_logger


def _parse_size(size_str: str) -> int:
    """Convert '10MB'-style sizes to bytes; a bare number is already bytes."""
    size_str = size_str.upper().strip()
    unit = size_str[-2:]
    if unit in SIZE_UNITS:
        return int(float(size_str[:-2]) * SIZE_UNITS[unit])
    return int(size_str)


class MessageLogger:
    """
    Engine logger callback writing messages to a standard logger.

    Trace messages go to debug level. The message identifier and parameters
    are attached to the log record as ``message_id`` and ``parameters``.
    """

    def __init__(self, name: str = "confscout"):
        """
        Initialize message logger.

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)
        self.name = name

    def __call__(self, message: Message) -> None:
        extra = {'message_id': message.message_id, 'parameters': message.parameters}
        getattr(self.logger, LEVEL_METHODS[message.level])(message.text, extra=extra)


default_logger = MessageLogger()
