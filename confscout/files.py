"""
File Descriptions
=================

Describe the configuration files searched for in each folder. A description
is either:

- a basename (``str``), such as ``.toolrc`` or ``.tool/tool.config``: any
  file named ``<basename>.<extension>`` is a candidate, the extension
  selecting the loader;
- a :class:`FileDescriptor`, giving an exact file name and its loader.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Union

from .loaders import Loader, PyprojectLoader, YamlLoader


@dataclass(frozen=True)
class FileDescriptor:
    """An exact file name with the loader used to read it."""
    name: str
    loader: Loader


FileDescription = Union[str, FileDescriptor]
FileFilter = Callable[[List[FileDescription]], List[FileDescription]]

PYPROJECT_FILE = 'pyproject.toml'


def is_file_basename(description: FileDescription) -> bool:
    return isinstance(description, str)


def default_files(name: str) -> List[FileDescription]:
    """
    Get the default file descriptions for an application.

    Args:
        name: Application name

    Returns:
        Ordered file descriptions, highest priority first
    """
    return [
        FileDescriptor(PYPROJECT_FILE, PyprojectLoader(name)),
        FileDescriptor(f'.{name}rc', YamlLoader()),
        f'.{name}rc',
        f'{name}.config',
        f'.{name}/{name}.config',
    ]


def no_pyproject(files: List[FileDescription]) -> List[FileDescription]:
    """Filter removing the ``pyproject.toml`` description."""
    return [
        description for description in files
        if not (isinstance(description, FileDescriptor) and description.name == PYPROJECT_FILE)
    ]


def files_are_filters(files: Sequence[Union[FileDescription, FileFilter]]) -> bool:
    """Tell if the given files option is a list of filters rather than descriptions."""
    return len(files) == 0 or callable(files[0])
