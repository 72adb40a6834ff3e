"""Key-value metadata attached to objects and directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


class Metadata(dict):
    """A mapping of metadata keys to string values."""

    def get(self, key: str, default: str = "") -> str:
        """The value for ``key``, or ``default`` (an empty string) if absent."""
        return super().get(key, default)

    def delete_key(self, key: str) -> None:
        """Remove ``key`` if present."""
        self.pop(key, None)

    def equal(self, other: Mapping[str, str] | None) -> bool:
        """Whether ``other`` holds the same keys and values; None counts as empty."""
        return dict(self) == dict(other or {})

    def copy(self) -> Metadata:
        """An independent copy."""
        return Metadata(self)


@dataclass
class MetadataHelp:
    """Description of a metadata key."""

    help: str = ""
    type: str = ""
    example: str = ""
    read_only: bool = False


@dataclass
class MetadataInfo:
    """Description of the metadata a backend supports."""

    system: dict[str, MetadataHelp] = field(default_factory=dict)
    help: str = ""