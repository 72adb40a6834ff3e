"""A fixed description of an object that is about to be uploaded."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from gdrivecore.hashtypes import HashType, HashUnsupportedError
from gdrivecore.interfaces import Info, ObjectInfo

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class StaticObjectInfo(ObjectInfo):
    """Object information given by plain values rather than a filesystem."""

    remote_name: str
    file_size: int = 0
    file_mod_time: datetime = field(default=_ZERO_TIME)
    hashes: dict[HashType, str] | None = None

    def fs(self) -> Info | None:
        """Always None: this object is not part of a filesystem."""
        return None

    def __str__(self) -> str:
        return self.remote_name

    def remote(self) -> str:
        return self.remote_name

    def hash(self, ht: HashType) -> str:
        """The known digest of type ``ht``; empty if no digests are known."""
        if self.hashes is None:
            return ""
        try:
            return self.hashes[ht]
        except KeyError:
            raise HashUnsupportedError() from None

    def mod_time(self) -> datetime:
        return self.file_mod_time

    def size(self) -> int:
        return self.file_size

    def storable(self) -> bool:
        return True