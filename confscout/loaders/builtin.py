"""
Built-in Loaders
================

Loaders for the configuration formats supported out of the box:
YAML, JSON, TOML, INI and Python modules.
"""

import configparser
import importlib.util
import json
import tomllib
from typing import Any, Dict, Optional

import yaml

from .base import Loader, LoaderDescription


class YamlLoader(Loader):
    """Load YAML files. JSON being a subset of YAML, JSON content is accepted too."""

    def load(self, content: str, file_name: str) -> Optional[Any]:
        return yaml.safe_load(content)


class JsonLoader(Loader):
    """Load JSON files."""

    def load(self, content: str, file_name: str) -> Optional[Any]:
        if not content.strip():
            return None
        return json.loads(content)


class TomlLoader(Loader):
    """Load TOML files."""

    def load(self, content: str, file_name: str) -> Optional[Any]:
        if not content.strip():
            return None
        return tomllib.loads(content)


class IniLoader(Loader):
    """Load INI files as a mapping of sections to mappings of string values."""

    def load(self, content: str, file_name: str) -> Optional[Any]:
        parser = configparser.ConfigParser(interpolation=None)
        parser.read_string(content, source=file_name)
        data: Dict[str, Dict[str, str]] = {
            section: dict(parser.items(section, raw=True)) for section in parser.sections()
        }
        defaults = parser.defaults()
        if defaults:
            data[parser.default_section] = dict(defaults)
        return data or None


class PythonLoader(Loader):
    """
    Load Python configuration modules.

    The file is imported as a private module, left out of ``sys.modules``,
    and its ``config`` global is the configuration. A module without
    ``config`` is considered empty.
    """

    def load(self, content: str, file_name: str) -> Optional[Any]:
        spec = importlib.util.spec_from_file_location('__confscout__', file_name)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot import {file_name} as a Python module")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return getattr(module, 'config', None)


class PyprojectLoader(Loader):
    """
    Load the ``[tool.<name>]`` table of a ``pyproject.toml`` file.

    A project file without such a table holds no configuration for us.
    """

    def __init__(self, name: str):
        self.name = name

    def load(self, content: str, file_name: str) -> Optional[Any]:
        data = tomllib.loads(content)
        return data.get('tool', {}).get(self.name)


BUILTIN_LOADERS: Dict[str, LoaderDescription] = {
    'yaml': LoaderDescription(filetypes=('yaml', 'yml'), loader=YamlLoader()),
    'json': LoaderDescription(filetypes='json', loader=JsonLoader()),
    'toml': LoaderDescription(filetypes='toml', loader=TomlLoader()),
    'ini': LoaderDescription(filetypes=('ini', 'cfg'), loader=IniLoader()),
    'python': LoaderDescription(filetypes='py', loader=PythonLoader()),
}
