"""Type definitions for doublylinked."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variable for stored values
T = TypeVar("T")

# Direction of a walk over the list
Direction: TypeAlias = Literal["forward", "backward"]
