"""
Shared test fixtures: recording logger, counting gateways and project trees.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pytest

from confscout.engine import AsyncGateway, SyncGateway
from confscout.messages import Level, Message


class RecordingLogger:
    """Logger callback keeping every message."""

    def __init__(self):
        self.messages: List[Message] = []

    def __call__(self, message: Message) -> None:
        self.messages.append(message)

    def ids(self, level: Optional[Level] = None) -> List[str]:
        return [m.message_id for m in self.messages if level is None or m.level == level]


class CountingGateway(SyncGateway):
    """Blocking gateway recording every call, with an optional forced listing order."""

    def __init__(self, listing: Optional[List[str]] = None):
        self.calls = []
        self.listing = listing

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    def is_folder(self, path):
        self.calls.append(('is_folder', path))
        return super().is_folder(path)

    def file_exists(self, path):
        self.calls.append(('file_exists', path))
        return super().file_exists(path)

    def folder_content(self, path):
        self.calls.append(('folder_content', path))
        names = super().folder_content(path)
        if self.listing is not None:
            names = [name for name in self.listing if name in names]
        return names

    def load_config_file(self, path, loader):
        self.calls.append(('load_config_file', path))
        return super().load_config_file(path, loader)


class CountingAsyncGateway(AsyncGateway):
    """Non-blocking gateway recording every call."""

    def __init__(self):
        self.calls = []

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    async def is_folder(self, path):
        self.calls.append(('is_folder', path))
        return await super().is_folder(path)

    async def file_exists(self, path):
        self.calls.append(('file_exists', path))
        return await super().file_exists(path)

    async def folder_content(self, path):
        self.calls.append(('folder_content', path))
        return await super().folder_content(path)

    async def load_config_file(self, path, loader):
        self.calls.append(('load_config_file', path))
        return await super().load_config_file(path, loader)


def write(path: Path, content: str = '') -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def gateway():
    return CountingGateway()


@pytest.fixture
def async_gateway():
    return CountingAsyncGateway()


@pytest.fixture
def tree(tmp_path):
    """
    Folder tree ``home/project/sub/deep`` under a temporary folder.

    ``home`` is the stop folder used by the tests; nothing is written above it.
    """
    home = tmp_path / 'home'
    deep = home / 'project' / 'sub' / 'deep'
    deep.mkdir(parents=True)
    return {
        'root': tmp_path,
        'home': home,
        'project': home / 'project',
        'sub': home / 'project' / 'sub',
        'deep': deep,
    }


@pytest.fixture
def restore_logging():
    """Put the root logger back as it was after tests calling setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
