"""
Module Resolution Utilities
===========================

Locate modules and files the way ``import`` would, but against an explicit
list of search paths instead of the global interpreter state.
"""

import importlib.util
import os
import sys
from importlib.machinery import ModuleSpec, PathFinder
from typing import List, Optional, Sequence


def find_module_spec(name: str, paths: Sequence[str]) -> Optional[ModuleSpec]:
    """
    Find a top-level module.

    The given paths are searched first, then ``sys.path``, then the
    interpreter built-in modules.

    Args:
        name: Top-level module name (no dots)
        paths: Extra folders to search

    Returns:
        The module spec, or None if the module cannot be located
    """
    spec = PathFinder.find_spec(name, list(paths) + list(sys.path))
    if spec is None and name in sys.builtin_module_names:
        spec = importlib.util.find_spec(name)
    return spec


def _is_relative(name: str) -> bool:
    return name in ('.', '..') or name.startswith(('./', '../')) or (
        os.sep != '/' and name.startswith(('.' + os.sep, '..' + os.sep))
    )


def resolve_file_name(name: str, folder: str, module_paths: Sequence[str]) -> Optional[str]:
    """
    Resolve a configuration name to an absolute file name.

    The name may be an absolute path, a path relative to ``folder`` (starting
    with ``./`` or ``../``), or a module name optionally followed by a path
    inside that module's folder (``package/sub/file.yaml``).

    Args:
        name: The name to resolve
        folder: Folder relative names are resolved from
        module_paths: Extra folders where modules are searched

    Returns:
        The absolute file name, or None if the module cannot be found
    """
    name = os.path.expanduser(name)
    if os.path.isabs(name):
        return os.path.normpath(name)
    if _is_relative(name):
        return os.path.normpath(os.path.join(folder, name))

    parts: List[str] = name.replace(os.sep, '/').split('/')
    module_name, sub_path = parts[0], parts[1:]
    if not module_name or '.' in module_name:
        return None
    spec = find_module_spec(module_name, [folder] + list(module_paths))
    if spec is None:
        return None

    if not sub_path:
        return spec.origin if spec.has_location else None
    if spec.submodule_search_locations:
        module_folder = list(spec.submodule_search_locations)[0]
    elif spec.has_location:
        module_folder = os.path.dirname(spec.origin)
    else:
        return None
    return os.path.normpath(os.path.join(module_folder, *sub_path))
