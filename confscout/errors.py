"""
Errors raised while loading configuration.

These never escape the public search/load methods: the engine catches them,
logs their message and carries on.
"""

from typing import Any

from .messages import Level, Message, message


class ConfscoutError(Exception):
    """Loading error described by a message identifier and its parameters."""

    def __init__(self, message_id: str, *parameters: Any):
        self.internal_message: Message = message(Level.ERROR, message_id, *parameters)
        super().__init__(self.internal_message.text)

    @property
    def message_id(self) -> str:
        return self.internal_message.message_id


class ConfigurationError(ConfscoutError):
    """Raised by configuration descriptions when the loaded data is invalid."""

    def __init__(self, file_name: str, reason: str):
        super().__init__('invalid_configuration', file_name, reason)
