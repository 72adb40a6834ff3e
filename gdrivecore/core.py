"""Sizes, counters, directory listings, a simple pacer and run configuration."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable, Mapping
from concurrent.futures import CancelledError
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional, TypeVar

from gdrivecore.interfaces import DirEntry

T = TypeVar("T")

_POLL_INTERVAL = 0.05


class SizeSuffix(int):
    """A size in bytes."""

    def __str__(self) -> str:
        return "%d" % int(self)

    def byte(self) -> int:
        """The size in bytes as a plain integer."""
        return int(self)


BYTE = SizeSuffix(1)
KIBYTE = SizeSuffix(BYTE * 1024)
MIBYTE = SizeSuffix(KIBYTE * 1024)
GIBYTE = SizeSuffix(MIBYTE * 1024)
TIBYTE = SizeSuffix(GIBYTE * 1024)
PIBYTE = SizeSuffix(TIBYTE * 1024)
EIBYTE = SizeSuffix(PIBYTE * 1024)


class Counter:
    """A thread-safe running total."""

    def __init__(self, count: int = 0) -> None:
        self.count = count
        self._lock = threading.Lock()

    def inc(self, n: int) -> None:
        """Add ``n`` to the total."""
        with self._lock:
            self.count += n


class DirEntries(list):
    """A listing of objects and directories."""

    def sort_by_remote(self) -> None:
        """Sort the entries in place by their remote path."""
        self.sort(key=lambda entry: entry.remote())

    def __str__(self) -> str:
        return "[" + " ".join(str(entry) for entry in self) + "]"


@dataclass
class PacerState:
    """What the delay function is told about the last attempt."""

    consecutive_retries: int = 0
    last_error: Optional[BaseException] = None


def _as_seconds(delay: float | timedelta) -> float:
    if isinstance(delay, timedelta):
        return delay.total_seconds()
    return float(delay)


def _filled_queue(n: int) -> queue.Queue:
    tokens: queue.Queue = queue.Queue(maxsize=n)
    for _ in range(n):
        tokens.put_nowait(None)
    return tokens


class Pacer:
    """Limits concurrent calls and retries failed ones after a computed delay.

    ``calculate_delay`` receives a :class:`PacerState` and returns the delay
    before the next attempt, in seconds or as a ``timedelta``.
    """

    def __init__(self, calculate_delay: Callable[[PacerState], float | timedelta]) -> None:
        self._calculate_delay = calculate_delay
        self.retries = 3
        self.max_connections = 1
        self._tokens = _filled_queue(self.max_connections)

    @staticmethod
    def _acquire(tokens: queue.Queue, cancel: threading.Event | None) -> None:
        if cancel is None:
            tokens.get()
            return
        while True:
            if cancel.is_set():
                raise CancelledError("context canceled")
            try:
                tokens.get(timeout=_POLL_INTERVAL)
                return
            except queue.Empty:
                continue

    def call(self, fn: Callable[[], T], cancel: threading.Event | None = None) -> T | None:
        """Call ``fn``, retrying when it raises, and return its result.

        Once the retries are used up the last exception propagates. Setting
        ``cancel`` aborts waiting with :class:`CancelledError`.
        """
        for attempt in range(self.retries + 1):
            tokens = self._tokens
            self._acquire(tokens, cancel)
            try:
                return fn()
            except Exception as exc:
                if attempt >= self.retries:
                    raise
                error = exc
            finally:
                tokens.put(None)
            delay = _as_seconds(self._calculate_delay(PacerState(attempt, error)))
            if cancel is None:
                time.sleep(delay)
            elif cancel.wait(delay):
                raise CancelledError("context canceled")
        return None

    def set_max_connections(self, n: int) -> None:
        """Allow ``n`` concurrent calls from now on."""
        self.max_connections = n
        self._tokens = _filled_queue(n)

    def get_token(self) -> None:
        """Take a connection token, waiting until one is free."""
        self._tokens.get()

    def put_token(self) -> None:
        """Give a connection token back."""
        self._tokens.put(None)

    def call_without_context(self, fn: Callable[[], T]) -> T:
        """Call ``fn`` once while holding a connection token."""
        tokens = self._tokens
        tokens.get()
        try:
            return fn()
        finally:
            tokens.put(None)


@dataclass
class ConfigInfo:
    """Settings that affect how operations run."""

    no_retries: bool = False
    max_connections: int = 4
    transfers: int = 4


CONFIG_KEY = "gdrivecore.config_info"


def get_config(context: Mapping[str, Any] | None = None) -> ConfigInfo:
    """The :class:`ConfigInfo` stored in ``context``, or the defaults."""
    if context is not None:
        config = context.get(CONFIG_KEY)
        if isinstance(config, ConfigInfo):
            return config
    return ConfigInfo()


__all__ = [
    "BYTE",
    "CONFIG_KEY",
    "ConfigInfo",
    "Counter",
    "DirEntries",
    "DirEntry",
    "EIBYTE",
    "GIBYTE",
    "KIBYTE",
    "MIBYTE",
    "PIBYTE",
    "Pacer",
    "PacerState",
    "SizeSuffix",
    "TIBYTE",
    "get_config",
]