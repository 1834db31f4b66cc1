"""wordbits fixed-capacity bit set toolkit."""

from collections.abc import Sequence

from .engine.bitset import CAPACITY, FULL_MASK
from .engine.fixed import Drain, FixedBitSet32
from .engine.labels import LabelSpace


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`wordbits.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = ["main", "CAPACITY", "FULL_MASK", "Drain", "FixedBitSet32", "LabelSpace"]
