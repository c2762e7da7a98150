"""
Search cache: folder content and loaded results, keyed by absolute path.

Entries are never evicted; the cache lives as long as the engine instance
unless explicitly cleared.
"""

from typing import Any, Dict, List, Optional

MISSING = object()


class SearchCache:
    """Folder content cache and result cache."""

    def __init__(self):
        self._folders: Dict[str, List[str]] = {}
        self._results: Dict[str, Any] = {}

    def get_folder_content(self, folder: str) -> Optional[List[str]]:
        return self._folders.get(folder)

    def set_folder_content(self, folder: str, names: List[str]) -> None:
        self._folders[folder] = list(names)

    def has_result(self, path: str) -> bool:
        return path in self._results

    def get_result(self, path: str) -> Any:
        """Get the cached result for a file or folder, ``MISSING`` if not cached."""
        return self._results.get(path, MISSING)

    def set_result(self, path: str, result: Any) -> None:
        self._results[path] = result

    def clear(self) -> None:
        self._folders, self._results = {}, {}

    def __len__(self) -> int:
        return len(self._folders) + len(self._results)
