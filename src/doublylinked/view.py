"""Read-only views onto positions within a list."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from doublylinked.linkedlist import Node

T = TypeVar("T")


@dataclass(frozen=True)
class NodeView(Generic[T]):
    """Immutable handle on a single node of a DoublyLinkedList.

    Holding a view keeps its node and every node after it alive, even once
    the list itself is dropped, but never the nodes before it.
    """

    node: "Node[T]"

    @classmethod
    def of(cls, node: "Node[T] | None") -> "NodeView[T] | None":
        """Create a view on a node, passing None through."""
        if node is None:
            return None
        return cls(node=node)

    @property
    def value(self) -> T:
        """Return the value stored at this position."""
        return self.node.value

    def next(self) -> "NodeView[T] | None":
        """Return a view of the following node, or None at the tail."""
        return NodeView.of(self.node.next)

    def prev(self) -> "NodeView[T] | None":
        """Return a view of the preceding node, or None at the head."""
        return NodeView.of(self.node.prev)
