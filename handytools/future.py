"""Run a function in the background and fetch its result later."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, Tuple, TypeVar

A = TypeVar("A")


class Future(Generic[A]):
    """A value computed in a background thread.

    Calling the future waits for the result and returns it. The result is
    kept, so the future may be called any number of times from any thread.
    If the function raised, every call raises the same exception.
    """

    def __init__(self, func: Callable[[], A]) -> None:
        self._func = func
        self._result: Optional[A] = None
        self._exception: Optional[BaseException] = None
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            self._result = self._func()
        except BaseException as exc:  # re-raised to every caller
            self._exception = exc

    def __call__(self) -> A:
        self._thread.join()
        if self._exception is not None:
            raise self._exception
        return self._result  # type: ignore[return-value]


def future(func: Callable[[], A]) -> Future[A]:
    """Start func in the background and return a future for its result."""
    return Future(func)


def future_with_error(
    func: Callable[[], A],
) -> Future[Tuple[Optional[A], Optional[Exception]]]:
    """Start func in the background; the future yields (value, error).

    An exception raised by func is returned as the error instead of being
    raised, with None as the value; on success the error is None.
    """

    def capture() -> Tuple[Optional[A], Optional[Exception]]:
        try:
            return func(), None
        except Exception as exc:
            return None, exc

    return Future(capture)


def future_with_ok(func: Callable[[], Tuple[A, bool]]) -> Future[Tuple[A, bool]]:
    """Start func, which returns (value, ok), and return a future for that pair."""

    def unpack() -> Tuple[A, bool]:
        value, ok = func()
        return value, bool(ok)

    return Future(unpack)