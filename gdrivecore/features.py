"""Optional filesystem features and the interfaces that provide them."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional, Protocol, runtime_checkable

from gdrivecore.interfaces import Directory, Fs, Object, ObjectInfo


class EntryType(enum.IntEnum):
    """Whether a changed path is a directory or an object."""

    DIRECTORY = 0
    OBJECT = 1


@runtime_checkable
class Purger(Protocol):
    def purge(self, dir: str) -> None:
        """Delete every file in ``dir``."""


@runtime_checkable
class Copier(Protocol):
    def copy(self, src: Object, remote: str) -> Object:
        """Copy ``src`` to ``remote`` on the server if possible."""


@runtime_checkable
class Mover(Protocol):
    def move(self, src: Object, remote: str) -> Object:
        """Move ``src`` to ``remote`` on the server if possible."""


@runtime_checkable
class DirMover(Protocol):
    def dir_move(self, src: Fs, src_remote: str, dst_remote: str) -> None:
        """Move a directory on the server if possible."""


@runtime_checkable
class ChangeNotifier(Protocol):
    def change_notify(self, notify_func: Callable[[str, EntryType], None]) -> Any:
        """Call ``notify_func`` with each path that changes."""


@runtime_checkable
class UnWrapper(Protocol):
    def unwrap(self) -> Fs:
        """The filesystem this one wraps."""


@runtime_checkable
class PutUncheckeder(Protocol):
    def put_unchecked(self, stream: BinaryIO, src: ObjectInfo, *args: Any) -> Object:
        """Upload without checking for an existing object, possibly duplicating it."""


@runtime_checkable
class PutStreamer(Protocol):
    def put_stream(self, stream: BinaryIO, src: ObjectInfo, *args: Any) -> Object:
        """Upload a stream of unknown size."""


@runtime_checkable
class MergeDirser(Protocol):
    def merge_dirs(self, dirs: Sequence[Directory]) -> None:
        """Merge all ``dirs`` into the first and remove the others."""


_OPTIONAL_METHODS: tuple[tuple[type, str], ...] = (
    (Purger, "purge"),
    (Copier, "copy"),
    (Mover, "move"),
    (DirMover, "dir_move"),
    (ChangeNotifier, "change_notify"),
    (UnWrapper, "unwrap"),
    (PutUncheckeder, "put_unchecked"),
    (PutStreamer, "put_stream"),
    (MergeDirser, "merge_dirs"),
)


@dataclass
class Features:
    """Flags and optional operations a filesystem supports."""

    case_insensitive: bool = False
    duplicate_files: bool = False
    read_mime_type: bool = False
    write_mime_type: bool = False
    can_have_empty_directories: bool = False
    server_side_across_configs: bool = False
    filter_aware: bool = False
    read_metadata: bool = False
    write_metadata: bool = False
    user_metadata: bool = False
    read_dir_metadata: bool = False
    write_dir_metadata: bool = False
    user_dir_metadata: bool = False
    write_dir_set_mod_time: bool = False

    purge: Optional[Callable[..., Any]] = None
    copy: Optional[Callable[..., Any]] = None
    move: Optional[Callable[..., Any]] = None
    dir_move: Optional[Callable[..., Any]] = None
    change_notify: Optional[Callable[..., Any]] = None
    unwrap: Optional[Callable[..., Any]] = None
    put_unchecked: Optional[Callable[..., Any]] = None
    put_stream: Optional[Callable[..., Any]] = None
    merge_dirs: Optional[Callable[..., Any]] = None

    def fill(self, f: Any) -> Features:
        """Take the optional operations ``f`` provides; return self."""
        for protocol, name in _OPTIONAL_METHODS:
            if isinstance(f, protocol):
                setattr(self, name, getattr(f, name))
        return self