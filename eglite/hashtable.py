"""A chained hash table with pluggable hash, equality and destroy callbacks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], bool]
DestroyNotify = Callable[[Any], None]

_UINT_MASK = 0xFFFFFFFF
_MAXINT32 = 0x7FFFFFFF

_PRIME_TABLE = (
    11, 19, 37, 73, 109, 163, 251, 367, 557, 823, 1237,
    1861, 2777, 4177, 6247, 9371, 14057, 21089, 31627,
    47431, 71143, 106721, 160073, 240101, 360163,
    540217, 810343, 1215497, 1823231, 2734867, 4102283,
    6153409, 9230113, 13845163,
)


def _test_prime(x: int) -> bool:
    if x & 1:
        limit = int(math.sqrt(x)) if x > 0 else 0
        return all(x % n for n in range(3, limit, 2))
    return x == 2


def _calc_prime(x: int) -> int:
    for candidate in range((x & ~1) - 1, _MAXINT32, 2):
        if _test_prime(candidate):
            return candidate
    return x


def spaced_primes_closest(x: int) -> int:
    """Return a table size suited to hold about x entries."""
    for prime in _PRIME_TABLE:
        if x <= prime:
            return prime
    return _calc_prime(x)


def direct_hash(v: Any) -> int:
    """Hash by object identity."""
    return id(v) & _UINT_MASK


def direct_equal(a: Any, b: Any) -> bool:
    """Compare by object identity."""
    return a is b


def int_hash(v: int) -> int:
    """Hash an integer by its unsigned 32-bit value."""
    return v & _UINT_MASK


def int_equal(a: int, b: int) -> bool:
    """Compare two integers by value."""
    return a == b


def str_hash(s: str | bytes) -> int:
    """The classic shift-and-subtract string hash over the encoded bytes."""
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    if not data:
        return 0
    h = 0
    for byte in data[1:] + b"\0":
        signed = byte - 256 if byte > 127 else byte
        h = ((h << 5) - (h + signed)) & _UINT_MASK
    return h


def str_equal(a: str | bytes, b: str | bytes) -> bool:
    """Compare two strings by contents."""
    return a == b


@dataclass
class _Slot:
    key: Any
    value: Any


@dataclass(frozen=True)
class HashTableStats:
    """Chain statistics of a hash table."""

    size: int
    table_size: int
    max_chain_length: int
    max_chain_index: int

    def __str__(self) -> str:
        return (
            f"Size: {self.size} Table Size: {self.table_size} "
            f"Max Chain Length: {self.max_chain_length} at {self.max_chain_index}"
        )


class HashTable:
    """A hash table whose buckets hold chains, newest entry first."""

    def __init__(
        self,
        hash_func: Optional[HashFunc] = None,
        key_equal_func: Optional[EqualFunc] = None,
        key_destroy_func: Optional[DestroyNotify] = None,
        value_destroy_func: Optional[DestroyNotify] = None,
    ) -> None:
        self.hash_func: HashFunc = hash_func or direct_hash
        self.key_equal_func: EqualFunc = key_equal_func or direct_equal
        self.key_destroy_func = key_destroy_func
        self.value_destroy_func = value_destroy_func
        self._table_size = spaced_primes_closest(1)
        self._table: list[list[_Slot]] = [[] for _ in range(self._table_size)]
        self._in_use = 0
        self._threshold = 0
        self._last_rehash = self._table_size

    @property
    def table_size(self) -> int:
        """Current number of buckets."""
        return self._table_size

    def _bucket_index(self, key: Any) -> int:
        return (self.hash_func(key) & _UINT_MASK) % self._table_size

    def _destroy_slot(self, slot: _Slot) -> None:
        if self.key_destroy_func is not None:
            self.key_destroy_func(slot.key)
        if self.value_destroy_func is not None:
            self.value_destroy_func(slot.value)

    def _do_rehash(self) -> None:
        self._last_rehash = self._table_size
        old = self._table
        self._table_size = spaced_primes_closest(self._in_use)
        self._table = [[] for _ in range(self._table_size)]
        for chain in old:
            for slot in chain:
                self._table[self._bucket_index(slot.key)].insert(0, slot)

    def _rehash(self) -> None:
        diff = abs(self._last_rehash - self._in_use)
        if diff * 0.75 > self._table_size * 2:
            self._do_rehash()

    def _find_slot(self, key: Any) -> tuple[list[_Slot], int]:
        chain = self._table[self._bucket_index(key)]
        for position, slot in enumerate(chain):
            if self.key_equal_func(slot.key, key):
                return chain, position
        return chain, -1

    def insert_replace(self, key: Any, value: Any, replace: bool) -> None:
        """Store value under key; when replace is true the stored key is replaced too."""
        if self._in_use >= self._threshold:
            self._rehash()
        chain, position = self._find_slot(key)
        if position >= 0:
            slot = chain[position]
            if replace:
                if self.key_destroy_func is not None:
                    self.key_destroy_func(slot.key)
                slot.key = key
            if self.value_destroy_func is not None:
                self.value_destroy_func(slot.value)
            slot.value = value
            return
        chain.insert(0, _Slot(key, value))
        self._in_use += 1

    def insert(self, key: Any, value: Any) -> None:
        """Store value under key, keeping an already stored equal key."""
        self.insert_replace(key, value, False)

    def replace(self, key: Any, value: Any) -> None:
        """Store value under key, replacing an already stored equal key."""
        self.insert_replace(key, value, True)

    def lookup_extended(self, key: Any) -> Optional[tuple[Any, Any]]:
        """Return (stored_key, value) for key, or None when absent."""
        chain, position = self._find_slot(key)
        if position < 0:
            return None
        slot = chain[position]
        return slot.key, slot.value

    def lookup(self, key: Any) -> Any:
        """Return the value stored under key, or None when absent."""
        found = self.lookup_extended(key)
        return None if found is None else found[1]

    def remove(self, key: Any) -> bool:
        """Remove key, calling the destroy callbacks; return whether it was present."""
        chain, position = self._find_slot(key)
        if position < 0:
            return False
        slot = chain[position]
        self._destroy_slot(slot)
        del chain[position]
        self._in_use -= 1
        return True

    def steal(self, key: Any) -> bool:
        """Remove key without calling destroy callbacks; return whether it was present."""
        chain, position = self._find_slot(key)
        if position < 0:
            return False
        del chain[position]
        self._in_use -= 1
        return True

    def _iter_slots(self) -> Iterator[_Slot]:
        for chain in self._table:
            yield from chain

    def foreach(self, func: Callable[[Any, Any], Any]) -> None:
        """Call func(key, value) for every entry."""
        for slot in list(self._iter_slots()):
            func(slot.key, slot.value)

    def find(self, predicate: Callable[[Any, Any], bool]) -> Any:
        """Return the value of the first entry the predicate accepts, or None."""
        for slot in self._iter_slots():
            if predicate(slot.key, slot.value):
                return slot.value
        return None

    def _remove_matching(self, func: Callable[[Any, Any], bool], destroy: bool) -> int:
        count = 0
        for index, chain in enumerate(self._table):
            kept = []
            for slot in chain:
                if func(slot.key, slot.value):
                    if destroy:
                        self._destroy_slot(slot)
                    self._in_use -= 1
                    count += 1
                else:
                    kept.append(slot)
            self._table[index] = kept
        if count > 0:
            self._rehash()
        return count

    def foreach_remove(self, func: Callable[[Any, Any], bool]) -> int:
        """Remove every entry func accepts, calling destroy callbacks; return the count."""
        return self._remove_matching(func, True)

    def foreach_steal(self, func: Callable[[Any, Any], bool]) -> int:
        """Remove every entry func accepts without destroy callbacks; return the count."""
        return self._remove_matching(func, False)

    def remove_all(self) -> None:
        """Remove every entry, calling the destroy callbacks."""
        for chain in self._table:
            while chain:
                self.remove(chain[0].key)

    def destroy(self) -> None:
        """Drop every entry, calling the destroy callbacks, and empty the table."""
        for slot in list(self._iter_slots()):
            self._destroy_slot(slot)
        self._table = [[] for _ in range(self._table_size)]
        self._in_use = 0

    def keys(self) -> list[Any]:
        """All keys in iteration order."""
        return [slot.key for slot in self._iter_slots()]

    def values(self) -> list[Any]:
        """All values in iteration order."""
        return [slot.value for slot in self._iter_slots()]

    def items(self) -> list[tuple[Any, Any]]:
        """All (key, value) pairs in iteration order."""
        return [(slot.key, slot.value) for slot in self._iter_slots()]

    def stats(self) -> HashTableStats:
        """Return the size, bucket count and longest chain of the table."""
        max_len = 0
        max_index = -1
        for index, chain in enumerate(self._table):
            if len(chain) > max_len:
                max_len = len(chain)
                max_index = index
        return HashTableStats(self._in_use, self._table_size, max_len, max_index)

    def __len__(self) -> int:
        return self._in_use

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys."""
        return iter(self.keys())

    def __contains__(self, key: Any) -> bool:
        return self._find_slot(key)[1] >= 0