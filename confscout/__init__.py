"""
Confscout - Application Configuration Finder
============================================

Finds and loads the configuration file of an application, searching the
folder tree upwards from a starting point, in any supported format.

Modules:
- engine: The search engine, its sync/async drivers, gateways and cache
- loaders: Configuration file loaders and their registry
- description: Configuration descriptions and results
- files: Descriptions of the searched files
- utils: Logging and module resolution utilities
"""

__version__ = "1.0.0"

from .messages import Level, Message
from .errors import ConfigurationError, ConfscoutError
from .description import (
    ConfigDescription,
    ConfigResult,
    ParserContext,
    ResultFile,
    any_item,
    array,
    dataclass_item,
    single_or_array,
)
from .files import FileDescriptor, default_files, no_pyproject
from .loaders import Loader, LoaderDescription
from .engine import AsyncGateway, Confscout, SyncGateway
from .utils.logger import setup_logging

__all__ = [
    "Confscout",
    "ConfigDescription",
    "ConfigResult",
    "ResultFile",
    "ParserContext",
    "any_item",
    "array",
    "single_or_array",
    "dataclass_item",
    "FileDescriptor",
    "default_files",
    "no_pyproject",
    "Loader",
    "LoaderDescription",
    "SyncGateway",
    "AsyncGateway",
    "Level",
    "Message",
    "ConfscoutError",
    "ConfigurationError",
    "setup_logging",
]
