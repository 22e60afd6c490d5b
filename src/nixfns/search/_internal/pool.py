"""Fixed-size worker pool and the result channel it feeds.

The pool runs zero-argument callables on a ``ThreadPoolExecutor`` with a
fixed number of threads. ``done()`` shuts the executor down and waits, so once
it returns all pushed work has finished. Workers report back through a
``Channel``: unbounded, many senders, one receiver, drained after ``close()``.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from types import TracebackType
from typing import Generic, TypeVar

import structlog

from nixfns.core.errors import InternalError

logger = structlog.get_logger()

T = TypeVar("T")

Task = Callable[[], None]

# Marks the end of a channel's items
_STOP = object()


class WorkerPool:
    """
    Fixed pool of worker threads executing pushed tasks.

    Usage::

        with WorkerPool(4) as pool:
            for path in paths:
                pool.push(lambda path=path: handle(path))
        # every task has run here
    """

    def __init__(self, size: int, *, name: str = "nixfns-worker") -> None:
        if size < 1:
            raise ValueError(f"Worker pool size must be positive, got {size}")
        self.size = size
        self._lock = threading.Lock()
        self._closed = False
        self._executor = ThreadPoolExecutor(max_workers=size, thread_name_prefix=name)
        logger.debug("worker_pool_started", size=size)

    def push(self, task: Task) -> None:
        """Queue a task. Returns immediately."""
        with self._lock:
            if self._closed:
                raise InternalError.pool_closed()
            self._executor.submit(self._run, task)

    def done(self) -> None:
        """Stop accepting tasks and block until every queued task has run."""
        with self._lock:
            if self._closed:
                return
            self._closed = True

        self._executor.shutdown(wait=True)
        logger.debug("worker_pool_drained", size=self.size)

    @property
    def closed(self) -> bool:
        return self._closed

    @staticmethod
    def _run(task: Task) -> None:
        try:
            task()
        except Exception:
            # Tasks report their own failures; nothing reads the futures
            logger.exception("worker_task_failed")

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.done()


class Channel(Generic[T]):
    """Unbounded multi-producer, single-consumer queue.

    Iterating blocks for each item until ``close()`` has been called and every
    item sent before it has been yielded.
    """

    def __init__(self) -> None:
        self._items: queue.Queue[object] = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    def send(self, item: T) -> None:
        with self._lock:
            if self._closed:
                raise InternalError.unexpected("send on closed channel")
            self._items.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._items.put(_STOP)

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self._items.get()
            if item is _STOP:
                # Leave the marker so a later iteration ends too
                self._items.put(_STOP)
                return
            yield item  # type: ignore[misc]
