"""
Directory Gateways
==================

Filesystem operations needed by the search procedure, in a blocking flavour
(:class:`SyncGateway`) and a non-blocking one (:class:`AsyncGateway`, based
on ``aiofiles``). Both have the same semantics:

- a folder which does not exist has no content;
- folder content is returned in filesystem enumeration order, which is not
  sorted and may differ between platforms;
- loading a file reads it as UTF-8 text and hands it to the loader.
"""

import os
from typing import Any, List, Optional

import aiofiles
import aiofiles.os

from ..loaders import Loader


class SyncGateway:
    """Blocking filesystem access."""

    def is_folder(self, path: str) -> bool:
        return os.path.isdir(path)

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def folder_content(self, path: str) -> List[str]:
        try:
            return os.listdir(path)
        except (FileNotFoundError, NotADirectoryError):
            return []

    def load_config_file(self, path: str, loader: Loader) -> Optional[Any]:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
        return loader.load(content, path)


class AsyncGateway:
    """Non-blocking filesystem access."""

    async def is_folder(self, path: str) -> bool:
        return await aiofiles.os.path.isdir(path)

    async def file_exists(self, path: str) -> bool:
        return await aiofiles.os.path.isfile(path)

    async def folder_content(self, path: str) -> List[str]:
        try:
            return await aiofiles.os.listdir(path)
        except (FileNotFoundError, NotADirectoryError):
            return []

    async def load_config_file(self, path: str, loader: Loader) -> Optional[Any]:
        async with aiofiles.open(path, 'r', encoding='utf-8') as f:
            content = await f.read()
        return loader.load(content, path)
