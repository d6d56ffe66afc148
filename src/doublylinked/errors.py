"""Exception classes for doublylinked."""


class DoublyLinkedError(Exception):
    """Base exception for all doublylinked errors."""


class ListIndexError(DoublyLinkedError, IndexError):
    """Raised when a position is outside the bounds of the list."""


class ConcurrentModificationError(DoublyLinkedError, RuntimeError):
    """Raised when a list is structurally changed while it is being iterated."""


class ListClosedError(DoublyLinkedError):
    """Raised when operations are attempted on a closed SharedList."""
