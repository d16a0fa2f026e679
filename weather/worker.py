"""
Background fetch channel.

Weather requests run on a worker thread so zoom, pan and redraw never wait on
the network. Results are collected by ``poll()`` from the UI thread. Every
request gets a new token; only the result for the latest token is delivered,
so a new request supersedes any fetch still in flight.
"""

from __future__ import annotations
from concurrent.futures import (
    CancelledError, Executor, Future, ThreadPoolExecutor, TimeoutError as FutureTimeout,
)
from typing import Any, Callable, Dict, Optional, Tuple


def make_executor() -> ThreadPoolExecutor:
    """Single background thread shared by all fetch channels."""
    return ThreadPoolExecutor(max_workers=1, thread_name_prefix="weather-fetch")


class FetchChannel:
    """
    One stream of superseding requests (e.g. "current weather for the
    selected city").
    """

    def __init__(self, executor: Executor, name: str = "fetch"):
        self._executor = executor
        self.name = name
        self._token = 0
        self._pending: Dict[int, Future] = {}

    @property
    def latest_token(self) -> int:
        return self._token

    def request(self, fn: Callable[..., Any], *args) -> int:
        """Submit fn(*args); returns the token identifying this request."""
        self._token += 1
        self._pending[self._token] = self._executor.submit(fn, *args)
        return self._token

    def is_pending(self) -> bool:
        fut = self._pending.get(self._token)
        return fut is not None and not fut.done()

    def poll(self) -> Optional[Tuple[int, Any]]:
        """
        Collect finished requests. Stale ones are dropped.

        Returns:
            (token, result) for the latest request if it has finished,
            otherwise None.
        """
        result = None
        for token, fut in list(self._pending.items()):
            if not fut.done():
                if token != self._token:
                    fut.cancel()
                continue
            del self._pending[token]
            if token != self._token:
                continue
            try:
                result = (token, fut.result())
            except Exception as e:
                print(f"Error in {self.name} worker: {e!r}")
                result = (token, None)
        return result

    def wait(self, timeout: Optional[float] = None) -> Optional[Tuple[int, Any]]:
        """Block until the latest request finishes, then poll()."""
        fut = self._pending.get(self._token)
        if fut is not None:
            try:
                fut.exception(timeout=timeout)
            except (CancelledError, FutureTimeout):
                return None
        return self.poll()

    def cancel(self):
        """Forget every outstanding request."""
        for fut in self._pending.values():
            fut.cancel()
        self._pending.clear()
        self._token += 1
