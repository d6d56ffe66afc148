"""doublylinked - Generic doubly-linked list with weak back-references and O(1) end operations."""

from doublylinked.errors import (
    ConcurrentModificationError,
    DoublyLinkedError,
    ListClosedError,
    ListIndexError,
)
from doublylinked.linkedlist import DoublyLinkedList, Node, ValuesView, dll
from doublylinked.shared import SharedList
from doublylinked.types import Direction
from doublylinked.view import NodeView

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "NodeView",
    "ValuesView",
    "SharedList",
    "dll",
    "DoublyLinkedError",
    "ListIndexError",
    "ConcurrentModificationError",
    "ListClosedError",
    "Direction",
]
