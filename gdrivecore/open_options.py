"""Options that control how an object is opened, mostly as HTTP headers."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def _check_target(option: object, s: object) -> None:
    if not isinstance(s, str):
        raise TypeError(f"{option} can only be applied to a str, not {type(s).__name__}")


@dataclass(frozen=True)
class RangeOption:
    """A byte range; a negative start or end is left open."""

    start: int
    end: int

    def header(self) -> tuple[str, str]:
        value = "bytes="
        if self.start >= 0:
            value += str(self.start)
        value += "-"
        if self.end >= 0:
            value += str(self.end)
        return "Range", value

    def apply(self, s: str) -> None:
        """Check that the option is applied to a path; a range changes nothing in it."""
        _check_target(self, s)

    def __str__(self) -> str:
        return f"RangeOption({self.start},{self.end})"

    def mandatory(self) -> bool:
        return True

    def decode(self, size: int) -> tuple[int, int]:
        """The (offset, limit) the range selects; a limit of -1 means to the end."""
        if self.start >= 0:
            limit = self.end - self.start + 1 if self.end >= 0 else -1
            return self.start, limit
        offset = size - self.end if self.end >= 0 else 0
        return offset, -1


@dataclass(frozen=True)
class SeekOption:
    """Read from ``offset`` to the end."""

    offset: int

    def header(self) -> tuple[str, str]:
        return "Range", f"bytes={self.offset}-"

    def __str__(self) -> str:
        return f"SeekOption({self.offset})"

    def mandatory(self) -> bool:
        return True

    def apply(self, s: str) -> None:
        """Check that the option is applied to a path; a seek changes nothing in it."""
        _check_target(self, s)


@dataclass(frozen=True)
class GenericHTTPOption:
    """An arbitrary HTTP header."""

    key: str
    value: str

    def header(self) -> tuple[str, str]:
        return self.key, self.value

    def __str__(self) -> str:
        return f"GenericHTTPOption({_quote(self.key)},{_quote(self.value)})"

    def mandatory(self) -> bool:
        return False


@dataclass(frozen=True)
class NullOption:
    """An option that does nothing."""

    def header(self) -> tuple[str, str]:
        return "", ""

    def apply(self, s: str) -> None:
        """Check that the option is applied to a path; it changes nothing in it."""
        _check_target(self, s)

    def __str__(self) -> str:
        return "NullOption()"

    def mandatory(self) -> bool:
        return False


def _fix_one(option: Any, size: int) -> Any:
    if isinstance(option, SeekOption):
        return RangeOption(option.offset, size - 1)
    if isinstance(option, RangeOption):
        if option.start < 0:
            option = RangeOption(size - option.end, -1)
        if option.end > size or option.end < 0:
            option = RangeOption(option.start, size - 1)
    return option


def fix_range_option(options: Iterable[Any], size: int) -> list[Any]:
    """Turn ranges relative to the end, and seeks, into absolute ranges for ``size``."""
    if size < 0:
        return list(options)
    if size == 0:
        return [NullOption() if isinstance(o, RangeOption) else o for o in options]
    return [_fix_one(o, size) for o in options]