"""
Loader Manager
==============

Resolves which loader, if any, handles a given configuration file. Custom
loaders registered by the application are consulted before built-in ones.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..utils.modules import find_module_spec
from .base import Loader, LoaderDescription, LoaderReference
from .builtin import BUILTIN_LOADERS

logger = logging.getLogger(__name__)


def candidate_extensions(file_name: str) -> List[str]:
    """
    List the dotted suffixes of a file name, longest first.

    ``tool.config.yaml`` gives ``['config.yaml', 'yaml']``. A leading dot
    (hidden file) is not a suffix separator.
    """
    parts = file_name.lstrip('.').split('.')
    return ['.'.join(parts[i:]) for i in range(1, len(parts))]


class LoaderManager:
    """
    Registry of custom and built-in loaders.

    Loader instances are created lazily, the first time a file needs them,
    and kept for the lifetime of the manager.
    """

    def __init__(self, custom_loaders: Optional[Mapping[str, LoaderDescription]] = None):
        """
        Initialize the loader manager.

        Args:
            custom_loaders: Application loaders by name; they take precedence
                over built-in loaders handling the same suffix
        """
        self.custom_loaders: Dict[str, LoaderDescription] = dict(custom_loaders or {})
        self._instances: Dict[Tuple[str, str, Tuple[str, ...]], Optional[Loader]] = {}

    def get_loader_for(
        self,
        module_paths: Sequence[str],
        file_name: str,
        extension: Optional[str] = None
    ) -> Optional[LoaderReference]:
        """
        Get the loader for a file.

        Args:
            module_paths: Folders where required loader modules are searched
            file_name: Base name of the file
            extension: Exact suffix to match; if not given, every dotted
                suffix of the file name is tried, longest first

        Returns:
            The loader reference, or None if no loader handles the file
        """
        extensions = [extension] if extension is not None else candidate_extensions(file_name)
        for kind, registry in (('custom', self.custom_loaders), ('builtin', BUILTIN_LOADERS)):
            for ext in extensions:
                for name, description in registry.items():
                    if not description.handles(ext):
                        continue
                    loader = self._instantiate(kind, name, description, module_paths)
                    if loader is not None:
                        return LoaderReference(loader, name)
        return None

    def _instantiate(
        self,
        kind: str,
        name: str,
        description: LoaderDescription,
        module_paths: Sequence[str]
    ) -> Optional[Loader]:
        key = (kind, name, tuple(module_paths))
        if key not in self._instances:
            loader = None
            module_spec = find_module_spec(description.module, module_paths) if description.module else None
            if description.module and module_spec is None:
                logger.debug(f"Loader {name} unavailable: module {description.module} not found")
            else:
                loader = description.create(module_spec)
            self._instances[key] = loader
        return self._instances[key]
