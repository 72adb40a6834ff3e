"""Pacing and retrying of API calls."""

from __future__ import annotations

import abc
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

Paced = Callable[[], "tuple[bool, Optional[BaseException]]"]
"""A call to pace: returns whether to try again and the error, if any."""

Invoker = Callable[[int, int, Paced], "tuple[bool, Optional[BaseException]]"]
"""Wraps a paced call: receives the retry count, the retry limit and the call."""


@dataclass
class State:
    """Pacer state handed to a :class:`Calculator`.

    ``sleep_time`` is in seconds.
    """

    sleep_time: float = 0.0
    consecutive_retries: int = 0
    last_error: Optional[BaseException] = None


class Calculator(abc.ABC):
    """Works out how long to wait before the next call."""

    @abc.abstractmethod
    def calculate(self, state: State) -> float:
        """The sleep time in seconds for the given state."""


@dataclass
class DefaultCalculator(Calculator):
    """Exponential back-off between ``min_sleep`` and ``max_sleep`` seconds."""

    min_sleep: float = 0.0
    max_sleep: float = 0.0
    decay_constant: int = 0
    burst: int = 0

    def calculate(self, state: State) -> float:
        if state.consecutive_retries == 0:
            return 0.0
        if state.consecutive_retries == 1:
            return self.min_sleep
        sleep_time = state.sleep_time * (1 << self.decay_constant)
        sleep_time = max(sleep_time, self.min_sleep)
        if self.max_sleep > 0:
            sleep_time = min(sleep_time, self.max_sleep)
        return sleep_time


def default_invoker(
    attempt: int, tries: int, paced: Paced
) -> tuple[bool, Optional[BaseException]]:
    """Call ``paced``, never asking for another try once ``tries`` is reached."""
    again, err = paced()
    if attempt >= tries:
        return False, err
    return again, err


class Pacer:
    """Runs calls one at a time, retrying them with a calculated delay."""

    def __init__(
        self,
        *,
        max_connections: int = 8,
        retries: int = 10,
        calculator: Optional[Calculator] = None,
        invoker: Invoker = default_invoker,
    ) -> None:
        self.max_connections = max_connections
        self.retries = retries
        self.calculator = calculator if calculator is not None else DefaultCalculator()
        self.invoker = invoker
        self.state = State()
        self._lock = threading.Lock()
        self._pacer = threading.Semaphore(1)
        self._connections = threading.Semaphore(max_connections)

    def call(self, f: Paced) -> None:
        """Run ``f`` until it no longer asks to be tried again.

        ``f`` returns ``(again, error)``. Each time ``again`` is true the
        pacer sleeps for the calculated time and calls it once more, up to
        ``retries`` times. The error from the last call, if any, is raised.
        """
        err: Optional[BaseException] = None
        consecutive_retries = 0
        for attempt in range(self.retries + 1):
            self._pacer.acquire()
            try:
                with self._connections:
                    again, err = self.invoker(consecutive_retries, self.retries, f)
                if not again or attempt >= self.retries:
                    with self._lock:
                        self.state.consecutive_retries = 0
                        self.state.last_error = None
                    break
                with self._lock:
                    self.state.consecutive_retries += 1
                    self.state.last_error = err
                    sleep_time = self.calculator.calculate(self.state)
                    self.state.sleep_time = sleep_time
                consecutive_retries += 1
                time.sleep(sleep_time)
            finally:
                self._pacer.release()
        if err is not None:
            raise err


def new_google_drive(**kwargs) -> Pacer:
    """A pacer for Google Drive calls; keyword arguments as for :class:`Pacer`."""
    return Pacer(**kwargs)