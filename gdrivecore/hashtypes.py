"""Hash algorithms known to the filesystem layer."""

from __future__ import annotations

import enum
import hashlib
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable

_CHUNK_SIZE = 64 * 1024


class HashUnsupportedError(ValueError):
    """The requested hash type is not supported."""

    def __init__(self, message: str = "hash type not supported") -> None:
        super().__init__(message)


class HashType(enum.IntFlag):
    """A hashing algorithm, or a combination of them as bit flags."""

    NONE = 0
    MD5 = 1 << 1
    SHA1 = 1 << 2
    SHA256 = 1 << 3

    def __str__(self) -> str:
        names = [d.name for t, d in _DEFINITIONS.items() if self & t]
        return ",".join(names) if names else "none"

    def width(self) -> int:
        """Number of hex characters in a digest of this type, 0 if not a single type."""
        definition = _DEFINITIONS.get(self)
        return definition.width if definition else 0

    def new(self) -> Any:
        """A fresh hashlib object for this type, or None if it is not a single type."""
        definition = _DEFINITIONS.get(self)
        return definition.factory() if definition else None

    def _definition(self) -> _Definition:
        if self == HashType.NONE:
            raise ValueError("can't compute hash for None type")
        definition = _DEFINITIONS.get(self)
        if definition is None:
            raise HashUnsupportedError(f"unknown hash type {self}")
        return definition

    def sum(self, data: bytes) -> str:
        """Hex digest of ``data``."""
        hasher = self._definition().factory()
        hasher.update(data)
        return hasher.hexdigest()

    def stream(self, reader: BinaryIO) -> str:
        """Hex digest of everything read from ``reader``."""
        hasher = self._definition().factory()
        for chunk in iter(lambda: reader.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
        return hasher.hexdigest()


@dataclass(frozen=True)
class _Definition:
    name: str
    width: int
    factory: Callable[[], Any]


_DEFINITIONS: dict[HashType, _Definition] = {
    HashType.MD5: _Definition("md5", 32, hashlib.md5),
    HashType.SHA1: _Definition("sha1", 40, hashlib.sha1),
    HashType.SHA256: _Definition("sha256", 64, hashlib.sha256),
}

_BY_NAME: dict[str, HashType] = {d.name: t for t, d in _DEFINITIONS.items()}

TYPE_UNSET = HashType(0xFFFFFFFF)


def from_string(s: str) -> HashType:
    """Parse a comma separated list of hash names."""
    if s in ("", "none"):
        return HashType.NONE
    result = HashType.NONE
    for part in s.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            result |= _BY_NAME[part.lower()]
        except KeyError:
            raise ValueError(f'unknown hash type "{part}"') from None
    return result


def new_hash_set(types: Iterable[HashType]) -> dict[HashType, str]:
    """A mapping from each requested type to an empty digest."""
    return {t: "" for t in types}