"""
One-time Execution
==================
A lock-guarded gate that runs a function exactly once per instance.
"""

import threading
from typing import Callable


class Once:
    """
    Run a function at most once, even under concurrent callers.

    Callers arriving while the first call is still running block until it
    finishes, so nobody observes a half-initialized result. If the function
    raises, the gate stays closed and the next caller tries again.

    Usage:
        once = Once()
        once.do(lambda: setup())
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def do(self, func: Callable[[], None]) -> None:
        if self._done:
            return
        with self._lock:
            if not self._done:
                func()
                self._done = True
