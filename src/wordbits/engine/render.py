"""Debug rendering of raw bit words."""
from __future__ import annotations

PREFIX = "BitSet["
SET_TOKEN = "1, "
CLEAR_TOKEN = "0, "
SUFFIX = "zeros]"


def render_bits(bits: int) -> str:
    """Render ``bits`` from bit 0 upward, stopping after the highest set bit.

    >>> render_bits(0b101)
    'BitSet[1, 0, 1, zeros]'
    >>> render_bits(0)
    'BitSet[zeros]'
    """
    parts = [PREFIX]
    probe = 1
    pending = bits
    while pending:
        if pending & probe:
            parts.append(SET_TOKEN)
            pending ^= probe
        else:
            parts.append(CLEAR_TOKEN)
        probe <<= 1
    parts.append(SUFFIX)
    return "".join(parts)
