"""Run a group of callables in threads, collecting the first failure.

A group can be tied to a cancellable context: the context is cancelled
the first time a task fails or the first time ``Group.wait`` returns.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional


class Context:
    """A cancellation signal that may be derived from a parent context."""

    def __init__(self, parent: Optional["Context"] = None) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._children: list[Context] = []
        if parent is not None:
            parent._add_child(self)

    def _add_child(self, child: "Context") -> None:
        with self._lock:
            if not self._event.is_set():
                self._children.append(child)
                return
        child.cancel()

    def cancel(self) -> None:
        """Cancel this context and every context derived from it."""
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            children, self._children = self._children, []
        for child in children:
            child.cancel()

    def cancelled(self) -> bool:
        """Return True once the context has been cancelled."""
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or the timeout passes; report whether cancelled."""
        return self._event.wait(timeout)


class _Slots:
    """Bounded pool of run slots shared by the tasks started under one limit."""

    __slots__ = ("limit", "used")

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.used = 0

    def full(self) -> bool:
        return self.used >= self.limit


class Group:
    """A collection of threads working on subtasks of one overall task.

    A fresh group has no limit on active tasks and cancels nothing on error.
    """

    def __init__(self) -> None:
        self._cancel: Optional[Callable[[], None]] = None
        self._cond = threading.Condition()
        self._running = 0
        self._slots: Optional[_Slots] = None
        self._failed = False
        self._error: Optional[BaseException] = None

    def _record(self, exc: BaseException) -> None:
        with self._cond:
            if self._failed:
                return
            self._failed = True
            self._error = exc
            cancel = self._cancel
        if cancel is not None:
            cancel()

    def _run(self, fn: Callable[[], Any], slots: Optional[_Slots]) -> None:
        try:
            fn()
        except BaseException as exc:  # noqa: BLE001 - every failure is reported by wait()
            self._record(exc)
        finally:
            with self._cond:
                if slots is not None:
                    slots.used -= 1
                self._running -= 1
                self._cond.notify_all()

    def _start(self, fn: Callable[[], Any], slots: Optional[_Slots]) -> None:
        thread = threading.Thread(target=self._run, args=(fn, slots), daemon=True)
        thread.start()

    def go(self, fn: Callable[[], Any]) -> None:
        """Run fn in a new thread, first blocking while the group is at its limit.

        The first task to raise cancels the group; its exception is raised by wait().
        """
        with self._cond:
            slots = self._slots
            if slots is not None:
                while slots.full():
                    self._cond.wait()
                slots.used += 1
            self._running += 1
        self._start(fn, slots)

    def try_go(self, fn: Callable[[], Any]) -> bool:
        """Run fn in a new thread only if the group is below its limit.

        Returns whether the task was started.
        """
        with self._cond:
            slots = self._slots
            if slots is not None:
                if slots.full():
                    return False
                slots.used += 1
            self._running += 1
        self._start(fn, slots)
        return True

    def wait(self) -> None:
        """Block until every task has finished, then raise the first failure, if any."""
        with self._cond:
            while self._running:
                self._cond.wait()
            cancel = self._cancel
            error = self._error
        if cancel is not None:
            cancel()
        if error is not None:
            raise error

    def set_limit(self, n: int) -> None:
        """Limit the number of active tasks to n; a negative n removes the limit.

        The limit must not change while tasks started under it are active.
        """
        with self._cond:
            if n < 0:
                self._slots = None
                return
            if self._slots is not None and self._slots.used:
                raise RuntimeError(
                    "errgroup: modify limit while "
                    f"{self._slots.used} goroutines in the group are still active"
                )
            self._slots = _Slots(n)


def with_context(parent: Optional[Context] = None) -> tuple[Group, Context]:
    """Return a new group and a context derived from parent that the group cancels."""
    ctx = Context(parent)
    group = Group()
    group._cancel = ctx.cancel
    return group, ctx