"""
Messages
========

Structured log messages emitted by the search engine. A message carries a
severity level, a stable identifier and its parameters, so that loggers can
either render it with the default templates or react to the identifier.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class Level(Enum):
    """Message severity levels (higher numbers are more severe)."""
    TRACE = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4


MESSAGE_TEMPLATES = {
    # Trace
    'search_in_folder': "Searching for configuration in folder {0}",
    'loaded_from_cache': "Configuration loaded from cache",
    'loading_file': "Loading configuration file {0}",
    'using_loader': "Using loader {0}",
    'empty_configuration': "Configuration file is empty",
    # Information
    'loaded_configuration': "Configuration loaded from file {0}",
    # Warning
    'multiple_files': "Multiple configuration files found for {0}, using the first one",
    # Errors
    'file_not_found': "Configuration file {0} not found",
    'no_loader_found': "No loader found for file {0}",
    'invalid_configuration': "Invalid configuration in {0}: {1}",
    'loading_error': "Error while loading configuration: {0}",
    'internal_error': "Internal error: {0}",
}


@dataclass(frozen=True)
class Message:
    """A log message produced by the engine."""
    level: Level
    message_id: str
    parameters: Tuple[Any, ...] = ()

    def __post_init__(self):
        if self.message_id not in MESSAGE_TEMPLATES:
            raise ValueError(f"Unknown message identifier: {self.message_id}")

    @property
    def text(self) -> str:
        return MESSAGE_TEMPLATES[self.message_id].format(*self.parameters)

    def __str__(self) -> str:
        return f"{self.level.name}: {self.text}"


def message(level: Level, message_id: str, *parameters: Any) -> Message:
    """Build a message from positional parameters."""
    return Message(level, message_id, tuple(parameters))
