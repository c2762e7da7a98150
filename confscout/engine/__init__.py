"""
Engine package.

Provides the Confscout finder plus the drivers, gateways and cache it is made of.
"""
from .cache import MISSING, SearchCache  # noqa: F401
from .confscout import Confscout  # noqa: F401
from .drivers import async_execute, sync_execute  # noqa: F401
from .gateway import AsyncGateway, SyncGateway  # noqa: F401
from .options import SearchOptions, build_options  # noqa: F401
from .requests import FileExists, FolderContent, IsFolder, LoadConfigFile, Request  # noqa: F401
