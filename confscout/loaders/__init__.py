"""
Loaders Module
==============

Configuration file loaders and the registry resolving them.
"""

from .base import Loader, LoaderDescription, LoaderReference
from .builtin import (
    BUILTIN_LOADERS,
    IniLoader,
    JsonLoader,
    PyprojectLoader,
    PythonLoader,
    TomlLoader,
    YamlLoader,
)
from .manager import LoaderManager, candidate_extensions

__all__ = [
    'Loader',
    'LoaderDescription',
    'LoaderReference',
    'LoaderManager',
    'candidate_extensions',
    'BUILTIN_LOADERS',
    'YamlLoader',
    'JsonLoader',
    'TomlLoader',
    'IniLoader',
    'PythonLoader',
    'PyprojectLoader',
]
