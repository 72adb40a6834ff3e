"""Descriptions of backends and their options."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from gdrivecore.interfaces import Fs

NewFsFunc = Callable[[str, str, Optional[Mapping[str, str]]], Fs]
"""Creates a filesystem from a remote name, a root path and a configuration."""


@dataclass
class OptionExample:
    """An example value of an option."""

    value: str = ""
    help: str = ""


@dataclass
class Option:
    """A configuration option of a backend."""

    name: str
    help: str = ""
    provider: str = ""
    default: Any = None
    examples: list[OptionExample] = field(default_factory=list)


@dataclass
class RegInfo:
    """Information about a backend."""

    name: str
    description: str = ""
    new_fs: Optional[NewFsFunc] = None
    options: list[Option] = field(default_factory=list)


def register(info: RegInfo) -> None:
    """Announce a backend."""
    print(f"Registered backend {json.dumps(info.name, ensure_ascii=False)}: {info.description}")