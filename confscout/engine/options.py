"""
Search Options
==============

Immutable per-engine parameters, normalized from the keyword arguments given
by the application. Unset (``None``) arguments take their default value.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, Tuple, Union

from ..files import FileDescription, FileFilter, default_files, files_are_filters
from ..loaders import LoaderDescription
from ..messages import Message
from ..utils.logger import default_logger

MODES = ('sync', 'async')


@dataclass(frozen=True)
class SearchOptions:
    """Definitive engine parameters."""
    files: Tuple[FileDescription, ...]
    search_stop: str
    module_paths: Tuple[str, ...]
    base_directory: str
    cache: bool = True
    logger: Callable[[Message], None] = default_logger
    custom_loaders: Mapping[str, LoaderDescription] = field(default_factory=dict)
    mode: str = 'sync'


def build_options(
    name: str,
    files: Optional[Sequence[Union[FileDescription, FileFilter]]] = None,
    search_stop: Optional[Union[str, os.PathLike]] = None,
    module_paths: Optional[Union[str, os.PathLike, Sequence[Union[str, os.PathLike]]]] = None,
    cache: Optional[bool] = None,
    logger: Optional[Callable[[Message], None]] = None,
    custom_loaders: Optional[Mapping[str, LoaderDescription]] = None,
    mode: Optional[str] = None,
    base_directory: Optional[Union[str, os.PathLike]] = None
) -> SearchOptions:
    """
    Normalize engine options.

    Args:
        name: Application name, used for the default file descriptions
        files: File descriptions replacing the default ones, or filters
            applied in order to the default ones
        search_stop: Last folder searched, user home by default
        module_paths: Extra folders where modules are searched; the base
            directory is always searched first
        cache: Whether folder content and results are cached (default True)
        logger: Message callback, forwarding to standard logging by default
        custom_loaders: Application loaders by name
        mode: 'sync' (default) or 'async', the flavour of search() and load()
        base_directory: Folder relative paths are resolved from, current
            working directory by default

    Returns:
        The normalized options
    """
    base = os.path.abspath(os.fspath(base_directory) if base_directory is not None else os.getcwd())

    mode = mode or 'sync'
    if mode not in MODES:
        raise ValueError(f"Invalid mode: {mode}. Must be one of {MODES}")

    stop = os.fspath(search_stop) if search_stop is not None else str(Path.home())
    stop = os.path.normpath(os.path.join(base, os.path.expanduser(stop)))

    if module_paths is None:
        module_paths = []
    elif isinstance(module_paths, (str, os.PathLike)):
        module_paths = [module_paths]
    resolved_paths = [base] + [os.path.normpath(os.path.join(base, os.fspath(p))) for p in module_paths]

    if files is None or files_are_filters(files):
        descriptions = default_files(name)
        for file_filter in files or []:
            descriptions = file_filter(descriptions)
    else:
        descriptions = list(files)

    return SearchOptions(
        files=tuple(descriptions),
        search_stop=stop,
        module_paths=tuple(resolved_paths),
        base_directory=base,
        cache=True if cache is None else cache,
        logger=logger or default_logger,
        custom_loaders=dict(custom_loaders or {}),
        mode=mode,
    )
