"""Keep termination signals from interrupting writes that are in progress."""

from __future__ import annotations

import os
import signal
import threading
from typing import Callable

_EXIT_CODE = 130
_SIGNAL_NAMES = ("SIGTERM", "SIGINT", "SIGQUIT")


class _WriteGuard:
    """Shared state between writers and the shutdown path."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._writes = 0
        self._handler_at_work = False

    @property
    def writes(self) -> int:
        with self._cond:
            return self._writes

    def acquire_write(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._handler_at_work)
            self._writes += 1

    def release_write(self) -> None:
        with self._cond:
            self._writes -= 1
            self._cond.notify_all()

    def begin_shutdown(self) -> None:
        with self._cond:
            self._handler_at_work = True
            self._cond.wait_for(lambda: self._writes == 0)

    def end_shutdown(self) -> None:
        with self._cond:
            self._handler_at_work = False
            self._cond.notify_all()


_GUARD = _WriteGuard()


class TinHat:
    """Context manager during which termination is held back."""

    def __enter__(self) -> "TinHat":
        _GUARD.acquire_write()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _GUARD.release_write()


def writes_in_progress() -> int:
    """Number of currently active `TinHat` sections."""
    return _GUARD.writes


def _shutdown(fx: Callable[[], None]) -> None:
    _GUARD.begin_shutdown()
    try:
        fx()
        os._exit(_EXIT_CODE)
    finally:
        _GUARD.end_shutdown()


def signal_handler(fx: Callable[[], None]) -> None:
    """Run `fx` and exit with code 130 on SIGTERM, SIGINT or SIGQUIT.

    The shutdown waits until no `TinHat` section is active. Must be called
    from the main thread.
    """

    def _on_signal(signum, frame) -> None:
        threading.Thread(target=_shutdown, args=(fx,), name="tinhat-shutdown").start()

    for name in _SIGNAL_NAMES:
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, _on_signal)