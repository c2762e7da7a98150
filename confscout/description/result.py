"""
Configuration result with its provenance.
"""

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class ResultFile:
    """The file a configuration was loaded from, and the files it extends."""
    file_name: str
    extends: List['ResultFile'] = field(default_factory=list)


@dataclass(frozen=True)
class ConfigResult(Generic[T]):
    """A loaded configuration."""
    configuration: T
    files: ResultFile

    @property
    def file_name(self) -> str:
        return self.files.file_name
