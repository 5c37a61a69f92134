"""Growable digit storage.

A ``DigitBuffer`` is an owned, index-addressable sequence of small
unsigned values (0-255).  It keeps an explicit ``length`` and
``capacity``: the backing ``bytearray`` always holds exactly
``capacity`` slots and only the first ``length`` are meaningful.

Digits are stored least-significant first, so index 0 is the units
digit of whatever number owns the buffer.

An optional ``max_capacity`` caps how many digits the buffer may hold.
Anything that would go past it raises ``ResourceExhausted`` and leaves
the buffer as it was.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from errors import IndexOutOfRange, InvalidArgument, ResourceExhausted

MAX_SLOT_VALUE = 255


class DigitBuffer:
    """Owned, growable sequence of digit values with amortized doubling."""

    def __init__(
        self,
        digits: Iterable[int] = (),
        *,
        max_capacity: int | None = None,
    ) -> None:
        self._storage = bytearray()
        self._length = 0
        self.max_capacity = max_capacity
        for d in digits:
            self.append(d)

    # -- size bookkeeping ---------------------------------------------------

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._storage)

    def is_empty(self) -> bool:
        return self._length == 0

    def _check_limit(self, slots: int) -> None:
        if self.max_capacity is not None and slots > self.max_capacity:
            raise ResourceExhausted(slots)

    def _grow(self, new_capacity: int) -> None:
        self._check_limit(new_capacity)
        try:
            self._storage.extend(bytes(new_capacity - len(self._storage)))
        except MemoryError:
            raise ResourceExhausted(new_capacity) from None

    def reserve(self, capacity: int) -> None:
        """Set capacity to exactly ``capacity`` slots.

        Shrinking below the current length is rejected.
        """
        if capacity < self._length:
            raise InvalidArgument(
                f"Capacity {capacity} is smaller than length {self._length}"
            )
        if capacity > self.capacity:
            self._grow(capacity)
        else:
            del self._storage[capacity:]

    def resize(self, new_length: int) -> None:
        """Zero-fill up to ``new_length`` or truncate down to it."""
        if new_length < 0:
            raise InvalidArgument(f"Negative length: {new_length}")
        if new_length > self._length:
            self._check_limit(new_length)
        if new_length > self.capacity:
            self.reserve(new_length)
        for i in range(self._length, new_length):
            self._storage[i] = 0
        self._length = new_length

    def clear(self) -> None:
        """Drop every digit; capacity is retained."""
        self._length = 0

    # -- element access -----------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexOutOfRange(index, self._length)

    @staticmethod
    def _check_value(value: int) -> None:
        if not 0 <= value <= MAX_SLOT_VALUE:
            raise InvalidArgument(f"Digit value {value} outside 0..{MAX_SLOT_VALUE}")

    def get(self, index: int) -> int:
        self._check_index(index)
        return self._storage[index]

    def set(self, index: int, value: int) -> None:
        self._check_index(index)
        self._check_value(value)
        self._storage[index] = value

    __getitem__ = get
    __setitem__ = set

    def front(self) -> int:
        return self.get(0)

    def back(self) -> int:
        return self.get(self._length - 1)

    def append(self, value: int) -> None:
        """Add ``value`` at the most significant end, doubling when full.

        Doubling stops at ``max_capacity``; past it the append fails.
        """
        self._check_value(value)
        self._check_limit(self._length + 1)
        if self._length >= self.capacity:
            new_capacity = max(2, 2 * self.capacity)
            if self.max_capacity is not None:
                new_capacity = min(new_capacity, self.max_capacity)
            self._grow(new_capacity)
        self._storage[self._length] = value
        self._length += 1

    def truncate_last(self) -> int:
        """Remove and return the most significant digit."""
        if self._length == 0:
            raise IndexOutOfRange(0, 0)
        self._length -= 1
        return self._storage[self._length]

    # -- whole-buffer operations -------------------------------------------

    def reverse(self) -> None:
        """Reverse in place by swapping from both ends toward the middle."""
        lo, hi = 0, self._length - 1
        while lo < hi:
            self._storage[lo], self._storage[hi] = self._storage[hi], self._storage[lo]
            lo += 1
            hi -= 1

    def copy(self) -> DigitBuffer:
        """Deep copy with the same capacity and independent storage."""
        clone = DigitBuffer(max_capacity=self.max_capacity)
        clone._storage = bytearray(self._storage)
        clone._length = self._length
        return clone

    def shift_up(self, count: int = 1) -> None:
        """Insert ``count`` zero digits at the least significant end.

        Multiplies the represented magnitude by ``radix ** count``.  A lone
        zero digit stays as it is.
        """
        if count < 0:
            raise InvalidArgument(f"Negative shift: {count}")
        if count == 0 or (self._length == 1 and self._storage[0] == 0):
            return
        old_length = self._length
        self.resize(old_length + count)
        for i in range(old_length - 1, -1, -1):
            self._storage[i + count] = self._storage[i]
        for i in range(count):
            self._storage[i] = 0

    def trim(self) -> None:
        """Drop most significant zero digits, keeping at least one digit."""
        while self._length > 1 and self._storage[self._length - 1] == 0:
            self._length -= 1

    # -- python protocol ----------------------------------------------------

    def __iter__(self) -> Iterator[int]:
        for i in range(self._length):
            yield self._storage[i]

    def to_list(self) -> list[int]:
        return list(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitBuffer):
            return NotImplemented
        return self._storage[: self._length] == other._storage[: other._length]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DigitBuffer({self.to_list()!r})"
