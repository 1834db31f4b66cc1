"""Raw 32-bit word helpers."""
from __future__ import annotations

from collections.abc import Iterable

CAPACITY = 32
FULL_MASK = (1 << CAPACITY) - 1


def check_index(index: int) -> int:
    """Validate a member index and return it unchanged.

    Raises:
        TypeError: ``index`` is not an ``int`` (``bool`` is rejected too).
        IndexError: ``index`` is outside ``[0, CAPACITY)``.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"bit index must be an int, not {type(index).__name__}")
    if not 0 <= index < CAPACITY:
        raise IndexError(f"bit index {index} out of range for capacity {CAPACITY}")
    return index


def check_word(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"raw value must be an int, not {type(value).__name__}")
    if not 0 <= value <= FULL_MASK:
        raise ValueError(f"raw value {value:#x} does not fit in {CAPACITY} bits")
    return value


def bit_for(index: int) -> int:
    return 1 << check_index(index)


def make_bitset(indexes: Iterable[int]) -> int:
    value = 0
    for idx in indexes:
        value |= bit_for(idx)
    return value


def count_bits(value: int) -> int:
    """Count the number of set bits using native int.bit_count()."""
    return value.bit_count()


def clear_lowest(value: int) -> int:
    return value & (value - 1)


def single_bit_index(bit: int) -> int:
    """Return the position of ``bit``, which must have exactly one bit set.

    This is a count-trailing-zeros on a power of two.
    """
    if bit <= 0 or bit > FULL_MASK or bit & (bit - 1):
        raise RuntimeError(f"not a single bit: {bit:#x}")
    return bit.bit_length() - 1


def split_lowest(value: int) -> tuple[int, int]:
    """Clear the lowest set bit of a non-zero word.

    Returns ``(index, remaining)`` where ``index`` is the cleared position.
    """
    remaining = clear_lowest(value)
    return single_bit_index(~remaining & value), remaining


def iter_indexes(value: int) -> Iterable[int]:
    while value:
        index, value = split_lowest(value)
        yield index


def clear_bits(base: int, remove: int) -> int:
    return base & ~remove


def and_bits(a: int, b: int) -> int:
    return a & b


def or_bits(a: int, b: int) -> int:
    return a | b
