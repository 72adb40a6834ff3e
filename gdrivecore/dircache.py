"""A cache of directory paths to IDs and back."""

from __future__ import annotations

import abc
import threading
from typing import Optional


class DirCacheError(Exception):
    """A directory could not be found or created through the cache."""


class DirCacher(abc.ABC):
    """The low level directory operations a backend provides to the cache."""

    @abc.abstractmethod
    def find_leaf(self, path_id: str, leaf: str) -> Optional[str]:
        """The ID of ``leaf`` inside directory ``path_id``, or None if absent."""

    @abc.abstractmethod
    def create_dir(self, path_id: str, leaf: str) -> str:
        """Create ``leaf`` inside directory ``path_id`` and return its ID."""


def _join(*parts: str) -> str:
    return "/".join(part for part in parts if part)


class DirCache:
    """Maps directory paths to IDs and IDs to paths.

    :meth:`find_root` must be called before :meth:`find_dir`.
    """

    def __init__(self, root: str, root_id: str, fs: DirCacher) -> None:
        self._fs = fs
        self._root = root
        self._root_id = root_id
        self._true_root_id = root_id
        self._found_root = False
        self._cache: dict[str, str] = {}
        self._inv_cache: dict[str, str] = {}
        self._cache_lock = threading.Lock()
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[str]:
        """The cached ID of ``path``, or None."""
        with self._cache_lock:
            return self._cache.get(path)

    def get_inv(self, id: str) -> Optional[str]:
        """The cached path of directory ``id``, or None."""
        with self._cache_lock:
            return self._inv_cache.get(id)

    def put(self, path: str, id: str) -> None:
        """Remember that ``path`` has ``id``."""
        with self._cache_lock:
            self._cache[path] = id
            self._inv_cache[id] = path

    def find_root(self) -> str:
        """Find the root directory, creating missing ones, and return its ID."""
        with self._lock:
            if not self._found_root:
                self._root_id = self._find_root(self._root)
                self._found_root = True
            return self._root_id

    def _find_root(self, root: str) -> str:
        if root == "":
            return self._root_id
        directories = root.split("/")

        parent_id = self._root_id
        for i, name in enumerate(directories):
            if not name:
                continue
            dir_id = self.get(_join(*directories[: i + 1]))
            if dir_id is None:
                break
            parent_id = dir_id
        else:
            return parent_id

        last_path = ""
        for i, leaf in enumerate(directories):
            if not leaf:
                continue
            dir_path = _join(*directories[: i + 1])
            if self.get(dir_path) is not None:
                continue
            parent_path = _join(*directories[:i])
            parent = self.get(parent_path)
            if parent is None:
                raise DirCacheError(f"couldn't find parent directory: {parent_path}")
            try:
                dir_id = self._fs.create_dir(parent, leaf)
            except Exception as exc:
                raise DirCacheError(f'failed to make directory "{dir_path}": {exc}') from exc
            self.put(dir_path, dir_id)
            last_path = dir_path

        found = self.get(last_path)
        if found is None:
            raise DirCacheError("internal error: couldn't find lastPath in the cache")
        return found

    def find_dir(self, path: str) -> str:
        """The ID of directory ``path`` ("", "dir" or "dir/dir2") below the root."""
        with self._lock:
            if not self._found_root:
                raise DirCacheError("internal error: FindRoot not called")
            if path == "":
                return self._root_id
            parent_id = self._root_id
            dir_path = ""
            to_find: list[str] = []
            for part in path.split("/"):
                dir_path = _join(dir_path, part)
                cached = self.get(dir_path)
                if cached is not None:
                    parent_id = cached
                else:
                    to_find.append(part)

            for part in to_find:
                dir_id = self._fs.find_leaf(parent_id, part)
                if dir_id is None:
                    raise DirCacheError(f'couldn\'t find directory "{path}"')
                parent_id = dir_id
                dir_path = _join(dir_path, part)
                self.put(dir_path, dir_id)
            return parent_id

    def find_path(self, id: str) -> str:
        """The path of directory ``id``."""
        if id == "":
            raise DirCacheError("can't find path for empty ID")
        if id in (self._root_id, self._true_root_id):
            return self._root
        path = self.get_inv(id)
        if path is None:
            raise DirCacheError(f'couldn\'t find path for ID "{id}"')
        return path