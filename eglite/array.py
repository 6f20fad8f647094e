"""Growable arrays of values and of bytes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

_INITIAL_CAPACITY = 16


def _round_capacity(capacity: int) -> int:
    return (capacity + 63) & ~63


class Array:
    """A growable array with optional zero termination and zero clearing."""

    def __init__(
        self,
        zero_terminated: bool = False,
        clear: bool = False,
        reserved_size: int | None = None,
    ) -> None:
        self.zero_terminated = bool(zero_terminated)
        self.clear = bool(clear)
        self._items: list[Any] = []
        self._capacity = 0
        self._ensure_capacity(_INITIAL_CAPACITY if reserved_size is None else reserved_size)

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold before growing."""
        return self._capacity

    def _ensure_capacity(self, capacity: int) -> None:
        if capacity > self._capacity:
            self._capacity = _round_capacity(capacity)

    def _extra(self) -> int:
        return 1 if self.zero_terminated else 0

    def append(self, value: Any) -> "Array":
        """Append one value."""
        return self.append_vals((value,))

    def append_vals(self, values: Iterable[Any]) -> "Array":
        """Append every value in order."""
        new = list(values)
        self._ensure_capacity(len(self._items) + len(new) + self._extra())
        self._items.extend(new)
        return self

    def insert_val(self, index: int, value: Any) -> "Array":
        """Insert one value before position index."""
        return self.insert_vals(index, (value,))

    def insert_vals(self, index: int, values: Iterable[Any]) -> "Array":
        """Insert values before position index, which may equal the length."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} out of range")
        new = list(values)
        self._ensure_capacity(len(self._items) + len(new) + self._extra())
        self._items[index:index] = new
        return self

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index {index} out of range")

    def remove_index(self, index: int) -> "Array":
        """Remove the element at index, keeping the order of the rest."""
        self._check_index(index)
        del self._items[index]
        return self

    def remove_index_fast(self, index: int) -> "Array":
        """Remove the element at index by moving the last element into its place."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return self

    def set_size(self, length: int) -> None:
        """Grow or shrink the array to length elements."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._ensure_capacity(length)
        current = len(self._items)
        if length < current:
            del self._items[length:]
        else:
            filler = 0 if self.clear else None
            self._items.extend([filler] * (length - current))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        if self.zero_terminated and index == len(self._items):
            return 0
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Array({self._items!r})"


class ByteArray:
    """A growable array of bytes."""

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, data: bytes | bytearray | memoryview | Iterable[int]) -> "ByteArray":
        """Append the given bytes."""
        self._data.extend(data)
        return self

    def to_bytes(self) -> bytes:
        """Return the contents as an immutable bytes object."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return bytes(self._data[index])
        return self._data[index]

    def __repr__(self) -> str:
        return f"ByteArray({bytes(self._data)!r})"