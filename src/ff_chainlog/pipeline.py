"""
Producer/consumer plumbing: a bounded FIFO channel and its single consumer.

Any number of producer threads put records into a :class:`Channel`.
Exactly one :class:`Worker` thread takes them out in order and passes
each one to a processing callback.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from .exceptions import LoggerClosedError

if TYPE_CHECKING:
    from .record import Record

DEFAULT_CAPACITY = 4096

# Interval between retries while waiting on a full queue
_POLL_SECONDS = 0.05

_END_OF_STREAM = object()


class Channel:
    """
    Bounded FIFO queue of records.

    ``put`` blocks while the queue is full, until space frees up or the
    channel is closed. Once closed, ``put`` raises :class:`LoggerClosedError`;
    records already queued are still delivered.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Channel capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._queue: queue.Queue = queue.Queue(maxsize=capacity)
        # Guards _closed and _producers; close() waits on it until no put is in flight
        self._cond = threading.Condition()
        self._closed = False
        self._producers = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, record: Record) -> None:
        """
        Enqueue a record, waiting for space if the queue is full.

        Raises:
            LoggerClosedError: If the channel is closed before the record is queued
        """
        with self._cond:
            if self._closed:
                raise LoggerClosedError()
            self._producers += 1
        try:
            while True:
                try:
                    self._queue.put(record, timeout=_POLL_SECONDS)
                    return
                except queue.Full:
                    if self._closed:
                        raise LoggerClosedError() from None
        finally:
            with self._cond:
                self._producers -= 1
                self._cond.notify_all()

    def get(self) -> Record | None:
        """Take the next record, or ``None`` once the channel is closed and drained."""
        item = self._queue.get()
        if item is _END_OF_STREAM:
            return None
        return item

    def close(self, consumer_alive: Callable[[], bool]) -> bool:
        """
        Refuse further puts and queue the end-of-stream marker.

        Producers still waiting on a full queue are released first, either
        with their record queued or with :class:`LoggerClosedError`, so the
        marker is always the last item. It is only delivered while
        ``consumer_alive()`` is true, so a consumer that already stopped
        cannot leave this call blocked on a full queue.

        Returns:
            False if the channel was already closed
        """
        with self._cond:
            if self._closed:
                return False
            self._closed = True
            while self._producers:
                self._cond.wait()

        while consumer_alive():
            try:
                self._queue.put(_END_OF_STREAM, timeout=_POLL_SECONDS)
                break
            except queue.Full:
                continue
        return True

    def qsize(self) -> int:
        """Approximate number of queued records."""
        return self._queue.qsize()


class Worker:
    """
    The single consumer of a :class:`Channel`.

    ``process`` is called once per record, in queue order, from the worker
    thread only. Returning ``False`` from it stops the worker without
    draining the rest of the queue.
    """

    def __init__(
        self,
        channel: Channel,
        process: Callable[[Record], bool],
        name: str = "ff-chainlog-consumer",
    ):
        self.channel = channel
        self._process = process
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        """Close the channel and wait until the worker has drained it and exited."""
        self.channel.close(self._thread.is_alive)
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    def _run(self) -> None:
        while True:
            record = self.channel.get()
            if record is None:
                return
            if not self._process(record):
                return
