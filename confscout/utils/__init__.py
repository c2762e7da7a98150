"""
Utilities Module
================

Contains logging helpers and module resolution functions.
"""

from .logger import MessageLogger, default_logger, setup_logging
from .modules import find_module_spec, resolve_file_name

__all__ = [
    'setup_logging',
    'MessageLogger',
    'default_logger',
    'find_module_spec',
    'resolve_file_name',
]
