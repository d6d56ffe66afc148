"""Doubly-linked list with owning forward links and weak back-references."""

import operator
import reprlib
import weakref
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from doublylinked.errors import ConcurrentModificationError, ListIndexError
from doublylinked.types import Direction
from doublylinked.view import NodeView

T = TypeVar("T")


class Node(Generic[T]):
    """A node in the doubly-linked list.

    The forward link owns the next node. The backward link is a weak
    reference, so a chain of nodes never forms a reference cycle.
    """

    __slots__ = ("value", "next", "_prev", "__weakref__")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None
        self._prev: weakref.ref[Node[T]] | None = None

    @property
    def prev(self) -> "Node[T] | None":
        """Return the previous node, or None at the head."""
        if self._prev is None:
            return None
        return self._prev()

    @prev.setter
    def prev(self, node: "Node[T] | None") -> None:
        self._prev = weakref.ref(node) if node is not None else None


class ValuesView(Generic[T]):
    """Lazy, restartable iterable over the values of a list.

    Each call to iter() starts a new walk over the list as it is at that
    moment. The view itself holds no snapshot.
    """

    __slots__ = ("_list", "_direction")

    def __init__(self, lst: "DoublyLinkedList[T]", direction: Direction = "forward") -> None:
        self._list = lst
        self._direction = direction

    def __iter__(self) -> Iterator[T]:
        return self._list._walk(self._direction)

    def __len__(self) -> int:
        return len(self._list)

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list with O(1) insertion and removal at both ends.

    The list owns the forward chain starting at the head and keeps only a
    weak reference to the tail. Popping an empty list returns None rather
    than raising. Structural changes during a walk are detected and
    reported with ConcurrentModificationError.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional iterable whose items are appended in order.
        """
        self._head: Node[T] | None = None
        self._tail: weakref.ref[Node[T]] | None = None
        self._size = 0
        # Bumped on every structural change; walks compare against it
        self._version = 0
        if values is not None:
            self.extend(values)

    def push_front(self, value: T) -> None:
        """Insert a value before the current head. O(1)."""
        node = Node(value)
        if self._head is None:
            self._tail = weakref.ref(node)
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1
        self._version += 1

    def push_back(self, value: T) -> None:
        """Insert a value after the current tail. O(1)."""
        node = Node(value)
        tail = self._tail_node()
        if tail is None:
            self._head = node
        else:
            node.prev = tail
            tail.next = node
        self._tail = weakref.ref(node)
        self._size += 1
        self._version += 1

    def pop_front(self) -> T | None:
        """Remove and return the first value, or None if the list is empty. O(1)."""
        if self._head is None:
            return None
        return self._unlink(self._head)

    def pop_back(self) -> T | None:
        """Remove and return the last value, or None if the list is empty. O(1)."""
        tail = self._tail_node()
        if tail is None:
            return None
        return self._unlink(tail)

    def remove_at(self, index: int) -> T:
        """
        Remove the value at a position and return it.

        Negative indexes count from the back. The node is located by
        walking from whichever end is nearer, so this is O(n).

        Args:
            index: Position of the value to remove

        Returns:
            The removed value

        Raises:
            ListIndexError: If index is out of range
        """
        return self._unlink(self._node_at(index))

    def extend(self, values: Iterable[T]) -> None:
        """Append every value of an iterable in order.

        The iterable is consumed before the list changes, so walks over this
        list are accepted and a failing iterable leaves the list untouched.
        """
        for value in list(values):
            self.push_back(value)

    def clear(self) -> None:
        """Remove every value, unlinking the chain one node at a time."""
        node = self._head
        self._head = None
        self._tail = None
        while node is not None:
            following = node.next
            node.next = None
            node.prev = None
            node = following
        self._size = 0
        self._version += 1

    def first(self) -> NodeView[T] | None:
        """Return a view of the head, or None if the list is empty."""
        return NodeView.of(self._head)

    def last(self) -> NodeView[T] | None:
        """Return a view of the tail, or None if the list is empty."""
        return NodeView.of(self._tail_node())

    def iter(self) -> ValuesView[T]:
        """Return a restartable iterable over the values, head to tail."""
        return ValuesView(self, "forward")

    def iter_rev(self) -> ValuesView[T]:
        """Return a restartable iterable over the values, tail to head."""
        return ValuesView(self, "backward")

    def __iter__(self) -> Iterator[T]:
        return self._walk("forward")

    def __reversed__(self) -> Iterator[T]:
        return self._walk("backward")

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _tail_node(self) -> Node[T] | None:
        if self._tail is None:
            return None
        return self._tail()

    def _node_at(self, index: int) -> Node[T]:
        index = operator.index(index)
        position = index + self._size if index < 0 else index
        if not 0 <= position < self._size:
            raise ListIndexError(
                f"Index {index} out of range for list of length {self._size}"
            )

        if position < self._size // 2:
            node = self._head
            for _ in range(position):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail_node()
            for _ in range(self._size - 1 - position):
                node = node.prev  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _unlink(self, node: Node[T]) -> T:
        prev = node.prev
        following = node.next
        if prev is None:
            self._head = following
        else:
            prev.next = following
        if following is None:
            self._tail = weakref.ref(prev) if prev is not None else None
        else:
            following.prev = prev
        node.next = None
        node.prev = None
        self._size -= 1
        self._version += 1
        return node.value

    def _walk(self, direction: Direction) -> Iterator[T]:
        # Start node and version are fixed now, not on the first next()
        forward = direction == "forward"
        start = self._head if forward else self._tail_node()
        return self._follow(start, forward, self._version)

    def _follow(self, node: Node[T] | None, forward: bool, version: int) -> Iterator[T]:
        while True:
            if self._version != version:
                raise ConcurrentModificationError("List changed during iteration")
            if node is None:
                return
            yield node.value
            node = node.next if forward else node.prev


def dll(*values: T) -> DoublyLinkedList[T]:
    """Build a DoublyLinkedList holding the given values in order."""
    return DoublyLinkedList(values)
