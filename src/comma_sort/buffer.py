"""
Fixed-capacity integer buffer.

Slots are allocated up front; ``append`` past capacity is a no-op that
reports the drop instead of growing or raising.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from comma_sort.config import CAPACITY


class NumberBuffer:
    """Ordered, mutable run of signed integers with a hard capacity."""

    __slots__ = ("_slots", "_length", "capacity")

    def __init__(self, capacity: int = CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._slots: List[int] = [0] * capacity
        self._length = 0

    @classmethod
    def from_values(cls, values: Iterable[int], capacity: int = CAPACITY) -> NumberBuffer:
        buf = cls(capacity)
        for v in values:
            if not buf.append(v):
                break
        return buf

    def append(self, value: int) -> bool:
        """Store ``value``; return False (and store nothing) when full."""
        if self._length >= self.capacity:
            return False
        self._slots[self._length] = value
        self._length += 1
        return True

    def is_full(self) -> bool:
        return self._length >= self.capacity

    def _check(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("buffer index out of range")
        return index

    def __getitem__(self, index: int) -> int:
        return self._slots[self._check(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._slots[self._check(index)] = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        # Only the filled prefix; unused slots are never exposed
        for i in range(self._length):
            yield self._slots[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NumberBuffer):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"NumberBuffer({list(self)!r}, capacity={self.capacity})"

    def to_list(self) -> List[int]:
        return list(self)
