"""Fixed-capacity set of the integers 0-31 stored in a single word."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from . import bitset
from .bitset import CAPACITY, FULL_MASK
from .render import render_bits


class FixedBitSet32:
    """Set of small integers where bit ``i`` of ``bits`` marks member ``i``.

    Every operation taking an index accepts ``0 <= index < CAPACITY`` and
    raises :class:`IndexError` otherwise. Instances compare and hash by their
    raw word; do not mutate a set while it is used as a dict key.

    Assignment aliases. Use :meth:`copy` for an independent value.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        self._bits = bitset.check_word(bits)

    # ---- construction ----
    @classmethod
    def zero(cls) -> FixedBitSet32:
        return cls(0)

    @classmethod
    def full(cls) -> FixedBitSet32:
        return cls(FULL_MASK)

    @classmethod
    def from_3bits(cls, b0: int, b1: int, b2: int) -> FixedBitSet32:
        return cls(bitset.make_bitset((b0, b1, b2)))

    @classmethod
    def from_4bits(cls, b0: int, b1: int, b2: int, b3: int) -> FixedBitSet32:
        return cls(bitset.make_bitset((b0, b1, b2, b3)))

    @classmethod
    def from_indexes(cls, indexes: Iterable[int]) -> FixedBitSet32:
        return cls(bitset.make_bitset(indexes))

    def copy(self) -> FixedBitSet32:
        return FixedBitSet32(self._bits)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> FixedBitSet32:
        return self.copy()

    # ---- raw access ----
    @property
    def bits(self) -> int:
        return self._bits

    def as_u32(self) -> int:
        return self._bits

    # ---- mutation & query ----
    def set(self, index: int) -> None:
        self._bits |= bitset.bit_for(index)

    def clear(self, index: int) -> None:
        self._bits = bitset.clear_bits(self._bits, bitset.bit_for(index))

    def get(self, index: int) -> bool:
        return (self._bits & bitset.bit_for(index)) != 0

    def empty(self) -> bool:
        return self._bits == 0

    def __contains__(self, index: int) -> bool:
        return self.get(index)

    def __len__(self) -> int:
        return bitset.count_bits(self._bits)

    def __bool__(self) -> bool:
        return not self.empty()

    # ---- algebra ----
    def merge(self, other: FixedBitSet32) -> FixedBitSet32:
        return FixedBitSet32(bitset.or_bits(self._bits, _require_set(other)._bits))

    def intersect(self, other: FixedBitSet32) -> FixedBitSet32:
        return FixedBitSet32(bitset.and_bits(self._bits, _require_set(other)._bits))

    def difference(self, other: FixedBitSet32) -> FixedBitSet32:
        return FixedBitSet32(bitset.clear_bits(self._bits, _require_set(other)._bits))

    def issubset(self, other: FixedBitSet32) -> bool:
        return bitset.clear_bits(self._bits, _require_set(other)._bits) == 0

    def issuperset(self, other: FixedBitSet32) -> bool:
        return _require_set(other).issubset(self)

    def __or__(self, other: object) -> FixedBitSet32:
        if not isinstance(other, FixedBitSet32):
            return NotImplemented
        return self.merge(other)

    def __and__(self, other: object) -> FixedBitSet32:
        if not isinstance(other, FixedBitSet32):
            return NotImplemented
        return self.intersect(other)

    # ---- enumeration ----
    def pop_lowest(self) -> int | None:
        """Remove and return the smallest member, or ``None`` when empty."""
        if self._bits == 0:
            return None
        index, self._bits = bitset.split_lowest(self._bits)
        return index

    def drain(self) -> Drain:
        """Enumerate members in ascending order, removing each one as it is yielded.

        The set is empty once the iterator is exhausted. Iterate over the set
        itself (or :meth:`members`) to enumerate without consuming it.
        """
        return Drain(self)

    def members(self) -> list[int]:
        return list(self)

    def __iter__(self) -> Iterator[int]:
        return iter(bitset.iter_indexes(self._bits))

    # ---- comparison & display ----
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedBitSet32):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"FixedBitSet32({self._bits:#b})"

    def __str__(self) -> str:
        return render_bits(self._bits)


class Drain:
    """Iterator that consumes the lowest member of its set on every step."""

    __slots__ = ("_source",)

    def __init__(self, source: FixedBitSet32) -> None:
        self._source = source

    def __iter__(self) -> Drain:
        return self

    def __next__(self) -> int:
        index = self._source.pop_lowest()
        if index is None:
            raise StopIteration
        return index


def _require_set(other: object) -> FixedBitSet32:
    if not isinstance(other, FixedBitSet32):
        raise TypeError(f"expected FixedBitSet32, not {type(other).__name__}")
    return other


__all__ = ["CAPACITY", "Drain", "FixedBitSet32"]
