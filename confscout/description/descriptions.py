"""
Configuration Descriptions
==========================

A description turns the raw data produced by a loader into the configuration
value handed to the application, validating it on the way. Validation
failures raise :class:`ConfigurationError`, which the engine reports as a
loading error.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from ..errors import ConfigurationError

T = TypeVar('T')


@dataclass(frozen=True)
class ParserContext:
    """Where the data being parsed comes from."""
    key_name: str
    file_name: str
    final: bool = True

    def child(self, key: Any) -> 'ParserContext':
        key_name = f"{self.key_name}.{key}" if self.key_name else str(key)
        return ParserContext(key_name, self.file_name, self.final)

    def fail(self, reason: str) -> ConfigurationError:
        location = f"{self.key_name}: {reason}" if self.key_name else reason
        return ConfigurationError(self.file_name, location)


class ConfigDescription(ABC, Generic[T]):
    """Base class of configuration descriptions."""

    @abstractmethod
    def parse(self, data: Any, context: ParserContext) -> Optional[T]:
        """
        Parse raw data.

        Args:
            data: Raw data produced by a loader
            context: Parsing context

        Returns:
            The parsed value, or None if the data does not describe anything

        Raises:
            ConfigurationError: If the data is invalid
        """
        pass


class AnyItem(ConfigDescription[Any]):
    """Accept any data as is."""

    def parse(self, data: Any, context: ParserContext) -> Any:
        return data


class ArrayDescription(ConfigDescription[List[T]]):
    """A list whose items all follow the same description."""

    def __init__(self, item: ConfigDescription[T]):
        self.item = item

    def parse(self, data: Any, context: ParserContext) -> List[T]:
        if not isinstance(data, list):
            raise context.fail(f"expected a list, got {type(data).__name__}")
        return [self.item.parse(value, context.child(index)) for index, value in enumerate(data)]


class SingleOrArrayDescription(ArrayDescription[T]):
    """A list which may also be given as a single item."""

    def parse(self, data: Any, context: ParserContext) -> List[T]:
        return super().parse(data if isinstance(data, list) else [data], context)


class DataclassDescription(ConfigDescription[T]):
    """
    A mapping converted to a dataclass instance.

    Keys must match the dataclass fields; missing fields take their defaults.
    """

    def __init__(self, cls: Type[T]):
        if not is_dataclass(cls):
            raise TypeError(f"{cls!r} is not a dataclass")
        self.cls = cls
        self.field_names = {f.name for f in fields(cls)}

    def parse(self, data: Any, context: ParserContext) -> T:
        if not isinstance(data, Mapping):
            raise context.fail(f"expected a mapping, got {type(data).__name__}")
        unknown = sorted(str(key) for key in data if key not in self.field_names)
        if unknown:
            raise context.fail(f"unknown keys {unknown}")
        try:
            return self.cls(**data)
        except TypeError as e:
            raise context.fail(str(e)) from e


def any_item() -> AnyItem:
    return AnyItem()


def array(item: ConfigDescription[T]) -> ArrayDescription[T]:
    return ArrayDescription(item)


def single_or_array(item: ConfigDescription[T]) -> SingleOrArrayDescription[T]:
    return SingleOrArrayDescription(item)


def dataclass_item(cls: Type[T]) -> DataclassDescription[T]:
    return DataclassDescription(cls)
