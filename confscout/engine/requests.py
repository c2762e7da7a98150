"""
Requests
========

I/O intentions yielded by the search procedure. Each request names the
directory gateway operation fulfilling it and carries all of its arguments,
so that drivers need no other information.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from ..loaders import Loader


@dataclass(frozen=True)
class Request:
    """Base class of requests."""
    path: str

    operation = ''

    @property
    def arguments(self) -> Tuple[Any, ...]:
        return (self.path,)


@dataclass(frozen=True)
class IsFolder(Request):
    """Is the path an existing folder?"""
    operation = 'is_folder'


@dataclass(frozen=True)
class FileExists(Request):
    """Is the path an existing file?"""
    operation = 'file_exists'


@dataclass(frozen=True)
class FolderContent(Request):
    """Names of the entries of a folder."""
    operation = 'folder_content'


@dataclass(frozen=True)
class LoadConfigFile(Request):
    """Read a file and parse its content with a loader."""
    loader: Loader
    operation = 'load_config_file'

    @property
    def arguments(self) -> Tuple[Any, ...]:
        return (self.path, self.loader)
