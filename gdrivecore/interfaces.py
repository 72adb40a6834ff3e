"""Abstract interfaces for filesystems, objects and directories."""

from __future__ import annotations

import abc
from datetime import datetime, timedelta
from typing import Any, BinaryIO, Protocol, runtime_checkable

from gdrivecore.hashtypes import HashType

MOD_TIME_NOT_SUPPORTED = timedelta(days=100 * 365)
"""Precision reported by a filesystem that cannot store modification times."""

MAX_LEVEL = 2**31 - 1
"""Listing depth that stands for unlimited."""

LINK_SUFFIX = ".rclonelink"
"""Suffix added to a translated symbolic link."""


class Info(abc.ABC):
    """Read only information about a filesystem."""

    @abc.abstractmethod
    def name(self) -> str:
        """Name of the remote."""

    @abc.abstractmethod
    def root(self) -> str:
        """Root path of the remote."""

    @abc.abstractmethod
    def precision(self) -> timedelta:
        """Precision of the modification times."""

    @abc.abstractmethod
    def hashes(self) -> dict[HashType, str]:
        """Hash types the filesystem supports."""

    @abc.abstractmethod
    def features(self) -> Any:
        """Optional features of the filesystem."""


class DirEntry(abc.ABC):
    """Information common to objects and directories."""

    @abc.abstractmethod
    def fs(self) -> Info | None:
        """The filesystem this entry belongs to."""

    def __str__(self) -> str:
        return self.remote()

    @abc.abstractmethod
    def remote(self) -> str:
        """Path of the entry relative to the filesystem root."""

    @abc.abstractmethod
    def mod_time(self) -> datetime:
        """Modification time."""

    @abc.abstractmethod
    def size(self) -> int:
        """Size in bytes."""


class ObjectInfo(DirEntry):
    """Read only information about an object."""

    @abc.abstractmethod
    def hash(self, ht: HashType) -> str:
        """Digest of the given type."""

    @abc.abstractmethod
    def storable(self) -> bool:
        """Whether the object can be stored."""


class Object(ObjectInfo):
    """An object stored on a filesystem."""

    @abc.abstractmethod
    def set_mod_time(self, t: datetime) -> None:
        """Set the modification time."""

    @abc.abstractmethod
    def open(self, *args: Any) -> BinaryIO:
        """Open the object for reading, honouring the given open options."""

    @abc.abstractmethod
    def update(self, stream: BinaryIO, src: ObjectInfo, *args: Any) -> None:
        """Replace the content with ``stream``, described by ``src``."""

    @abc.abstractmethod
    def remove(self) -> None:
        """Delete the object."""


class Directory(DirEntry):
    """A directory on a filesystem."""

    @abc.abstractmethod
    def items(self) -> int:
        """Number of entries, or -1 if unknown."""

    @abc.abstractmethod
    def id(self) -> str:
        """Internal ID, or an empty string if unknown."""


class Fs(Info):
    """A storage system."""

    @abc.abstractmethod
    def list(self, dir: str) -> list[DirEntry]:
        """Objects and directories in ``dir``."""

    @abc.abstractmethod
    def new_object(self, remote: str) -> Object:
        """The object at ``remote``."""

    @abc.abstractmethod
    def put(self, stream: BinaryIO, src: ObjectInfo, *args: Any) -> Object:
        """Upload ``stream`` to the path described by ``src``."""

    @abc.abstractmethod
    def mkdir(self, dir: str) -> None:
        """Create the directory."""

    @abc.abstractmethod
    def rmdir(self, dir: str) -> None:
        """Remove the directory if it is empty."""


@runtime_checkable
class IDer(Protocol):
    """Something with a unique ID."""

    def id(self) -> str:
        """The unique ID."""


@runtime_checkable
class MimeTyper(Protocol):
    """Something with a MIME type."""

    def mime_type(self) -> str:
        """The MIME type."""


@runtime_checkable
class ModTimeSetter(Protocol):
    """Something whose modification time can be set."""

    def set_mod_time(self, t: datetime) -> None:
        """Set the modification time."""