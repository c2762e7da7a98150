"""
Confscout Engine
================

Searches the configuration of an application, walking up the folder tree
from a starting point until a configuration file is found or the stop folder
is reached.

The search and load algorithms are written once, as generators yielding
:mod:`requests <confscout.engine.requests>` instead of performing I/O. The
same generators are run either by the blocking driver or by the asyncio
driver, giving the ``*_sync`` and ``*_async`` methods. ``search`` and
``load`` are bound to one flavour or the other by the ``mode`` option.

Errors never escape the public methods: they are reported to the logger
callback and the method returns ``None``.

An engine instance is meant to serve one call at a time; concurrent calls
on the same instance share its cache and must be serialized by the caller.
"""

import os
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from ..description import ConfigDescription, ConfigResult, ParserContext, ResultFile, any_item
from ..errors import ConfscoutError
from ..files import FileDescription, FileFilter, is_file_basename
from ..loaders import LoaderDescription, LoaderManager, LoaderReference
from ..messages import Level, Message, message
from ..utils.modules import resolve_file_name
from .cache import MISSING, SearchCache
from .drivers import Procedure, async_execute, sync_execute
from .gateway import AsyncGateway, SyncGateway
from .options import build_options
from .requests import FileExists, FolderContent, IsFolder, LoadConfigFile

T = TypeVar('T')

PathType = Union[str, os.PathLike]


class Confscout(Generic[T]):
    """
    Configuration finder for one application.

    ``search`` and ``load`` block unless the finder is built with
    ``mode="async"``, in which case they return coroutines. Blocking is the
    default so that a plain script or a command line tool needs no event loop;
    ``search_async`` and ``load_async`` are available in both modes.

    Example:
        >>> finder = Confscout('mytool')
        >>> result = finder.search()
        >>> if result is not None:
        ...     print(result.file_name, result.configuration)
    """

    def __init__(
        self,
        name: str,
        description: Optional[ConfigDescription[T]] = None,
        *,
        files: Optional[Sequence[Union[FileDescription, FileFilter]]] = None,
        search_stop: Optional[PathType] = None,
        module_paths: Optional[Union[PathType, Sequence[PathType]]] = None,
        cache: Optional[bool] = None,
        logger: Optional[Callable[[Message], None]] = None,
        custom_loaders: Optional[Mapping[str, LoaderDescription]] = None,
        mode: Optional[str] = None,
        base_directory: Optional[PathType] = None,
        gateway: Optional[SyncGateway] = None,
        async_gateway: Optional[AsyncGateway] = None
    ):
        """
        Initialize the finder.

        Args:
            name: Application name
            description: Description parsing the loaded data, any data by default
            files: File descriptions, or filters of the default descriptions
            search_stop: Last folder searched, user home by default
            module_paths: Extra folders where modules are searched
            cache: Whether results are cached (default True)
            logger: Message callback
            custom_loaders: Application loaders by name
            mode: 'sync' (default) or 'async'
            base_directory: Folder relative paths are resolved from
            gateway: Blocking filesystem access
            async_gateway: Non-blocking filesystem access
        """
        self.name = name
        self.description: ConfigDescription[T] = description or any_item()
        self.options = build_options(
            name,
            files=files,
            search_stop=search_stop,
            module_paths=module_paths,
            cache=cache,
            logger=logger,
            custom_loaders=custom_loaders,
            mode=mode,
            base_directory=base_directory,
        )
        self.loader_manager = LoaderManager(self.options.custom_loaders)
        self.cache = SearchCache()
        self.gateway = gateway or SyncGateway()
        self.async_gateway = async_gateway or AsyncGateway()

        if self.options.mode == 'async':
            self.search = self.search_async
            self.load = self.load_async
        else:
            self.search = self.search_sync
            self.load = self.load_sync

    # ------------------------------------------------------------------
    def clear_cache(self) -> None:
        """Forget every cached folder content and result."""
        self.cache.clear()

    def search_sync(self, search_start: Optional[PathType] = None) -> Optional[ConfigResult[T]]:
        """
        Search for configuration, blocking.

        Args:
            search_start: File or folder where the search starts, base
                directory by default

        Returns:
            The configuration if found, None otherwise
        """
        return sync_execute(self._search_config(search_start), self.gateway)

    async def search_async(self, search_start: Optional[PathType] = None) -> Optional[ConfigResult[T]]:
        """Search for configuration with non-blocking I/O. See :meth:`search_sync`."""
        return await async_execute(self._search_config(search_start), self.async_gateway)

    def load_sync(self, name: str, folder: Optional[PathType] = None) -> Optional[ConfigResult[T]]:
        """
        Load a configuration file directly, blocking.

        Args:
            name: Absolute path, path relative to the folder (starting with ./
                or ../), or module name with an optional path inside the module
                folder
            folder: Folder the name is resolved from, base directory by default

        Returns:
            The configuration if loaded, None otherwise
        """
        return sync_execute(self._load_config(name, folder), self.gateway)

    async def load_async(self, name: str, folder: Optional[PathType] = None) -> Optional[ConfigResult[T]]:
        """Load a configuration file with non-blocking I/O. See :meth:`load_sync`."""
        return await async_execute(self._load_config(name, folder), self.async_gateway)

    # ------------------------------------------------------------------
    def _absolute(self, path: PathType) -> str:
        path = os.path.expanduser(os.fspath(path))
        return os.path.normpath(os.path.join(self.options.base_directory, path))

    def _search_config(self, search_start: Optional[PathType] = None) -> Procedure[Optional[ConfigResult[T]]]:
        start = self._absolute(search_start if search_start is not None else self.options.base_directory)
        try:
            folder = start if (yield IsFolder(start)) else os.path.dirname(start)
            return (yield from self._search_config_in_folder(folder))
        except Exception as e:
            self._log_error('internal', e)
            return None

    def _search_config_in_folder(self, folder: str) -> Procedure[Optional[ConfigResult[T]]]:
        self._log(Level.TRACE, 'search_in_folder', folder)

        cached = self.cache.get_result(folder)
        if cached is not MISSING:
            self._log(Level.TRACE, 'loaded_from_cache')
            return cached

        result = None
        try:
            result = yield from self._search_config_using_descriptions(folder)
        except Exception as e:
            self._log_error('loading', e)

        if result is None and folder != self.options.search_stop:
            parent_folder = os.path.dirname(folder)
            if parent_folder != folder:
                result = yield from self._search_config_in_folder(parent_folder)

        if self.options.cache:
            self.cache.set_result(folder, result)
        return result

    def _search_config_using_descriptions(self, folder: str) -> Procedure[Optional[ConfigResult[T]]]:
        for file_description in self.options.files:
            file_and_loader = yield from self._search_file_and_loader(folder, file_description)
            if file_and_loader is not None:
                file_name, loader = file_and_loader
                result = yield from self._load_config_file(file_name, loader)
                if result is not None:
                    self._log(Level.INFORMATION, 'loaded_configuration', file_name)
                    return result
        return None

    def _search_file_and_loader(
        self,
        folder: str,
        description: FileDescription
    ) -> Procedure[Optional[Tuple[str, LoaderReference]]]:
        if is_file_basename(description):
            searched_path = os.path.join(folder, description)
            folder_name = os.path.dirname(searched_path)
            prefix = os.path.basename(searched_path) + '.'

            file_names = self.cache.get_folder_content(folder_name)
            if file_names is None:
                file_names = yield FolderContent(folder_name)
                if self.options.cache:
                    self.cache.set_folder_content(folder_name, file_names)

            candidates = []
            for file_name in file_names:
                if not file_name.startswith(prefix):
                    continue
                loader = self.loader_manager.get_loader_for(
                    self.options.module_paths, file_name, file_name[len(prefix):]
                )
                if loader is not None:
                    candidates.append((os.path.join(folder_name, file_name), loader))

            if candidates:
                # Listing order decides, and it is filesystem dependent
                if len(candidates) > 1:
                    self._log(Level.WARNING, 'multiple_files', searched_path)
                return candidates[0]
        else:
            file_name = os.path.join(folder, description.name)
            if (yield FileExists(file_name)):
                return file_name, LoaderReference(description.loader)
        return None

    def _load_config(self, name: str, folder: Optional[PathType] = None) -> Procedure[Optional[ConfigResult[T]]]:
        try:
            base_folder = self._absolute(folder) if folder is not None else self.options.base_directory
            file_name = resolve_file_name(name, base_folder, self.options.module_paths)
            if file_name is None or not (yield FileExists(file_name)):
                raise ConfscoutError('file_not_found', name)
            return (yield from self._load_config_file(file_name))
        except Exception as e:
            self._log_error('loading', e)
        return None

    def _load_config_file(
        self,
        file_name: str,
        loader: Optional[LoaderReference] = None
    ) -> Procedure[Optional[ConfigResult[T]]]:
        absolute_file = self._absolute(file_name)
        self._log(Level.TRACE, 'loading_file', absolute_file)

        cached = self.cache.get_result(absolute_file)
        if cached is not MISSING:
            self._log(Level.TRACE, 'loaded_from_cache')
            return cached

        used_loader = loader or self.loader_manager.get_loader_for(
            self.options.module_paths, os.path.basename(absolute_file)
        )
        if used_loader is None:
            raise ConfscoutError('no_loader_found', absolute_file)
        if used_loader.name:
            self._log(Level.TRACE, 'using_loader', used_loader.name)

        result = None
        content = yield LoadConfigFile(absolute_file, used_loader.loader)
        if content is None:
            self._log(Level.TRACE, 'empty_configuration')
        else:
            configuration = self.description.parse(
                content, ParserContext(key_name='', file_name=absolute_file, final=True)
            )
            if configuration is not None:
                result = ConfigResult(configuration, ResultFile(absolute_file))

        if self.options.cache:
            self.cache.set_result(absolute_file, result)
        return result

    # ------------------------------------------------------------------
    def _log(self, level: Level, message_id: str, *parameters: Any) -> None:
        self.options.logger(message(level, message_id, *parameters))

    def _log_error(self, error_type: str, exception: Exception) -> None:
        """Log an exception as a loading or internal error."""
        if isinstance(exception, ConfscoutError):
            self.options.logger(exception.internal_message)
            return
        message_id = 'loading_error' if error_type == 'loading' else 'internal_error'
        self.options.logger(message(Level.ERROR, message_id, str(exception) or type(exception).__name__))
