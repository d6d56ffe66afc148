"""Asyncio-guarded list shared between tasks."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from doublylinked.errors import ListClosedError
from doublylinked.linkedlist import DoublyLinkedList

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SharedList(Generic[T]):
    """
    DoublyLinkedList shared between asyncio tasks.

    Every operation holds one lock around the whole list. Pops can wait for
    a value to arrive, which makes the list usable as a double-ended work
    queue between producers and consumers.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the shared list.

        Args:
            values: Optional iterable whose items are appended in order.
        """
        self._lock = asyncio.Lock()
        self._cond_changed = asyncio.Condition(self._lock)
        self._list = DoublyLinkedList[T](values)
        self._closed = False

    async def close(self) -> None:
        """Close the list and wake every waiting pop. Calling it again is a no-op."""
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            logger.debug("Closing shared list with %d values left", len(self._list))
            self._cond_changed.notify_all()

    async def __aenter__(self) -> "SharedList[T]":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()

    async def push_front(self, value: T) -> None:
        """
        Insert a value before the head.

        Raises:
            ListClosedError: If the list is closed
        """
        async with self._lock:
            if self._closed:
                raise ListClosedError("Cannot push to a closed list")
            self._list.push_front(value)
            self._cond_changed.notify_all()

    async def push_back(self, value: T) -> None:
        """
        Insert a value after the tail.

        Raises:
            ListClosedError: If the list is closed
        """
        async with self._lock:
            if self._closed:
                raise ListClosedError("Cannot push to a closed list")
            self._list.push_back(value)
            self._cond_changed.notify_all()

    async def pop_front(self, timeout: float | None = None) -> T:
        """
        Remove and return the first value.

        Blocks until a value is available or timeout expires.

        Args:
            timeout: Maximum time to wait for a value (None = wait forever)

        Raises:
            asyncio.TimeoutError: If timeout expires
            ListClosedError: If the list is or becomes closed
        """
        async with self._lock:
            await self._wait_for_value(timeout)
            return self._list.pop_front()  # type: ignore[return-value]

    async def pop_back(self, timeout: float | None = None) -> T:
        """
        Remove and return the last value.

        Blocks until a value is available or timeout expires.

        Args:
            timeout: Maximum time to wait for a value (None = wait forever)

        Raises:
            asyncio.TimeoutError: If timeout expires
            ListClosedError: If the list is or becomes closed
        """
        async with self._lock:
            await self._wait_for_value(timeout)
            return self._list.pop_back()  # type: ignore[return-value]

    async def try_pop_front(self) -> T | None:
        """Remove and return the first value without waiting, or None if empty."""
        async with self._lock:
            if self._closed:
                raise ListClosedError("Cannot pop from a closed list")
            return self._list.pop_front()

    async def try_pop_back(self) -> T | None:
        """Remove and return the last value without waiting, or None if empty."""
        async with self._lock:
            if self._closed:
                raise ListClosedError("Cannot pop from a closed list")
            return self._list.pop_back()

    async def remove_at(self, index: int) -> T:
        """
        Remove the value at a position and return it.

        Raises:
            ListIndexError: If index is out of range
            ListClosedError: If the list is closed
        """
        async with self._lock:
            if self._closed:
                raise ListClosedError("Cannot remove from a closed list")
            return self._list.remove_at(index)

    async def snapshot(self, *, reverse: bool = False) -> list[T]:
        """Return a copy of the values, head to tail (or tail to head if reverse)."""
        async with self._lock:
            if reverse:
                return list(reversed(self._list))
            return list(self._list)

    async def size(self) -> int:
        """Return the number of values in the list."""
        async with self._lock:
            return len(self._list)

    async def _wait_for_value(self, timeout: float | None) -> None:
        """Wait until the list is non-empty (must be called with lock held)."""
        if self._closed:
            raise ListClosedError("Cannot pop from a closed list")

        while not self._list:
            if timeout is not None:
                await asyncio.wait_for(self._cond_changed.wait(), timeout)
            else:
                await self._cond_changed.wait()
            if self._closed:
                logger.debug("Waiting pop abandoned, list was closed")
                raise ListClosedError("List was closed while waiting")
