"""
Loader Base Module
==================

Provides the uniform interface every configuration file loader implements,
and the descriptions used to register loaders against file suffixes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from importlib.machinery import ModuleSpec
from typing import Any, Callable, Optional, Tuple, Union


class Loader(ABC):
    """
    Abstract base class for configuration file loaders.

    A loader turns the text content of a file into raw configuration data.
    Returning ``None`` means the file holds no configuration for us; the
    search then goes on with the next candidate.
    """

    @abstractmethod
    def load(self, content: str, file_name: str) -> Optional[Any]:
        """
        Parse file content.

        Args:
            content: Text content of the file
            file_name: Absolute name of the file, for error messages

        Returns:
            Raw configuration data, or None if the file is empty
        """
        pass


LoaderFactory = Callable[[Optional[ModuleSpec]], Loader]


@dataclass(frozen=True)
class LoaderDescription:
    """
    Registration entry for a loader.

    Attributes:
        filetypes: Suffixes handled, without the leading dot (e.g. 'yaml')
        loader: Either a ready loader, or a factory receiving the spec of the
            required module (None when no module is required)
        module: Name of a module which must be resolvable for the loader to
            be available
    """
    filetypes: Union[str, Tuple[str, ...]]
    loader: Union[Loader, LoaderFactory]
    module: Optional[str] = None

    def __post_init__(self):
        filetypes = (self.filetypes,) if isinstance(self.filetypes, str) else tuple(self.filetypes)
        object.__setattr__(self, 'filetypes', tuple(ft.lstrip('.') for ft in filetypes))

    def handles(self, extension: str) -> bool:
        return extension in self.filetypes

    def create(self, module_spec: Optional[ModuleSpec]) -> Loader:
        if isinstance(self.loader, Loader):
            return self.loader
        return self.loader(module_spec)


@dataclass(frozen=True)
class LoaderReference:
    """A loader together with the name it is registered under, if any."""
    loader: Loader
    name: Optional[str] = field(default=None, compare=False)
