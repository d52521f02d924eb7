"""Ambient synchronization context and the scope that clears it.

Provides:
- ``SynchronizationContext``: decides where posted continuations run.
- ``LoopSynchronizationContext``: marshals continuations onto an asyncio loop.
- ``NoSynchronizationContextScope``: clears the ambient context until released.
- ``run_blocking``: blocking wait over an async callable, inside such a scope.

The ambient slot is a single ``ContextVar``. Nothing outside this module
reads or writes it; use ``get_current()`` / ``set_current()``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local across
    threads. No locks needed.
"""

import asyncio
import concurrent.futures
import threading
from collections.abc import Awaitable, Callable
from contextvars import ContextVar
from typing import Any, TypeVar

import anyio

T = TypeVar("T")


class SynchronizationContext:
    """Where continuations run.

    The base context runs everything inline on the calling thread.
    Subclasses override ``post`` (fire and forget) and ``send``
    (run and wait for the result).
    """

    __slots__ = ()

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        callback(*args)

    def send(self, callback: Callable[..., T], *args: Any) -> T:
        return callback(*args)


class LoopSynchronizationContext(SynchronizationContext):
    """Marshals continuations onto an asyncio event loop.

    ``post`` is safe from any thread. ``send`` runs inline when called
    on the loop's own thread, otherwise it blocks until the loop has
    run the callback. Blocking on a loop that is itself waiting on the
    caller deadlocks, which is what ``NoSynchronizationContextScope``
    exists to avoid.
    """

    __slots__ = ("_loop", "_thread_id")

    def __init__(self, loop: asyncio.AbstractEventLoop, thread_id: int | None = None) -> None:
        self._loop = loop
        self._thread_id = thread_id if thread_id is not None else threading.get_ident()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        self._loop.call_soon_threadsafe(callback, *args)

    def send(self, callback: Callable[..., T], *args: Any) -> T:
        if threading.get_ident() == self._thread_id:
            return callback(*args)

        future: concurrent.futures.Future[T] = concurrent.futures.Future()

        def _run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(callback(*args))
            except BaseException as exc:
                future.set_exception(exc)

        self._loop.call_soon_threadsafe(_run)
        return future.result()

    def __repr__(self) -> str:
        return f"<LoopSynchronizationContext loop={self._loop!r}>"


# -- Ambient slot --

_current: ContextVar[SynchronizationContext | None] = ContextVar(
    "ghostlyzer_sync_context", default=None
)


def get_current() -> SynchronizationContext | None:
    """Return the ambient synchronization context, or ``None``."""
    return _current.get()


def set_current(context: SynchronizationContext | None) -> None:
    """Install *context* as the ambient synchronization context."""
    _current.set(context)


def post_continuation(callback: Callable[..., Any], *args: Any) -> None:
    """Schedule a continuation where the ambient context wants it.

    With no context installed the callback runs inline.
    """
    context = _current.get()
    if context is None:
        callback(*args)
    else:
        context.post(callback, *args)


# -- Scope --


class ContextScope:
    """Handle returned by ``NoSynchronizationContextScope.enter()``.

    Holds the context that was current on entry. ``release()`` puts it
    back; only the first call has an effect. Usable as a context manager
    so the restore also happens when the protected block raises.
    """

    __slots__ = ("_released", "_saved")

    def __init__(self, saved: SynchronizationContext | None) -> None:
        self._saved = saved
        self._released = False

    @property
    def saved(self) -> SynchronizationContext | None:
        """The context that will be restored."""
        return self._saved

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Restore the captured synchronization context."""
        if self._released:
            return
        self._released = True
        _current.set(self._saved)

    def __enter__(self) -> "ContextScope":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"<ContextScope {state} saved={self._saved!r}>"


class NoSynchronizationContextScope:
    """A scope within which the synchronization context is ``None``.

    Usage::

        with NoSynchronizationContextScope.enter():
            result = wait_for_something()

    Nested scopes restore in LIFO order: each one captures whatever was
    current when it was entered, including ``None``.
    """

    __slots__ = ()

    @staticmethod
    def enter() -> ContextScope:
        """Clear the ambient context and return the scope that restores it."""
        scope = ContextScope(_current.get())
        _current.set(None)
        return scope


def run_blocking(func: Callable[..., Awaitable[T]], *args: Any) -> T:
    """Run an async callable to completion from synchronous code.

    Continuations scheduled while it runs are not marshalled back onto
    the caller's synchronization context. Raises ``RuntimeError`` when
    called from inside a running event loop.
    """
    with NoSynchronizationContextScope.enter():
        return anyio.run(func, *args)
