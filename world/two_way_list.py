"""List addressed by signed indices that grows in both directions."""
from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class TwoWayList(Generic[T]):
    """List split into a forward part (0, 1, 2, ...) and a backward part (-1, -2, ...).

    Non-negative indices address the forward part and negative indices the
    backward part. ``add_forward``/``add_backward`` append at the outer end of
    each part, so the list can grow away from zero in either direction without
    renumbering the items already stored.
    """

    __slots__ = ("_backward", "_forward")

    def __init__(self) -> None:
        self._backward: List[T] = []
        self._forward: List[T] = []

    # Internal utilities -------------------------------------------------
    def _part(self, index: int) -> List[T]:
        return self._backward if index < 0 else self._forward

    @staticmethod
    def _inner(index: int) -> int:
        return -index - 1 if index < 0 else index

    @staticmethod
    def _outer(inner: int, backward: bool) -> int:
        return -(inner + 1) if backward else inner

    # Sizes --------------------------------------------------------------
    @property
    def backward_count(self) -> int:
        return len(self._backward)

    @property
    def forward_count(self) -> int:
        return len(self._forward)

    @property
    def first_index(self) -> int:
        """Most negative index in use (0 when the backward part is empty)."""
        return -len(self._backward)

    @property
    def last_index(self) -> int:
        """Highest index in use (-1 when the forward part is empty)."""
        return len(self._forward) - 1

    def __len__(self) -> int:
        return len(self._backward) + len(self._forward)

    # Indexed access -----------------------------------------------------
    def __getitem__(self, index: int) -> T:
        part = self._part(index)
        inner = self._inner(index)
        if inner >= len(part):
            raise IndexError(f"TwoWayList index {index} out of range")
        return part[inner]

    def __setitem__(self, index: int, value: T) -> None:
        part = self._part(index)
        inner = self._inner(index)
        if inner >= len(part):
            raise IndexError(f"TwoWayList index {index} out of range")
        part[inner] = value

    def try_get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        part = self._part(index)
        inner = self._inner(index)
        if inner >= len(part):
            return default
        return part[inner]

    def try_set(self, index: int, value: T) -> bool:
        part = self._part(index)
        inner = self._inner(index)
        if inner >= len(part):
            return False
        part[inner] = value
        return True

    def index_of(self, value: T) -> Optional[int]:
        """Return the index of ``value`` or ``None``; the backward part is searched first."""
        for backward, part in ((True, self._backward), (False, self._forward)):
            try:
                inner = part.index(value)
            except ValueError:
                continue
            return self._outer(inner, backward)
        return None

    def __contains__(self, value: object) -> bool:
        return value in self._backward or value in self._forward

    # Growth -------------------------------------------------------------
    def insert(self, index: int, value: T) -> None:
        """Insert at ``index``, pushing the rest of that part one step outward.

        Index 0 inserts into the forward part and -1 into the backward part;
        items never move from one part to the other.
        """
        part = self._part(index)
        inner = self._inner(index)
        if inner > len(part):
            raise IndexError(f"TwoWayList index {index} out of range")
        part.insert(inner, value)

    def add_forward(self, value: T) -> None:
        self._forward.append(value)

    def add_backward(self, value: T) -> None:
        self._backward.append(value)

    # Removal ------------------------------------------------------------
    def remove_forward(self) -> Optional[T]:
        if not self._forward:
            return None
        return self._forward.pop()

    def remove_backward(self) -> Optional[T]:
        if not self._backward:
            return None
        return self._backward.pop()

    def remove(self, value: T) -> bool:
        """Remove the first match, backward part first. Return whether one was found."""
        for part in (self._backward, self._forward):
            try:
                part.remove(value)
            except ValueError:
                continue
            return True
        return False

    def remove_at(self, index: int) -> Optional[T]:
        part = self._part(index)
        inner = self._inner(index)
        if inner >= len(part):
            return None
        return part.pop(inner)

    # Iteration ----------------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        # Backward storage runs -1, -2, ... so walk it reversed for ascending order.
        yield from reversed(self._backward)
        yield from self._forward

    def items(self) -> Iterator[Tuple[int, T]]:
        """Yield ``(index, value)`` pairs from the most negative index upward."""
        index = self.first_index
        for value in self:
            yield index, value
            index += 1

    def __repr__(self) -> str:
        return f"TwoWayList({dict(self.items())!r})"
