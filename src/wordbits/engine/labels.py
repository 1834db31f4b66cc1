"""Named labels mapped onto bit set members."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .bitset import CAPACITY
from .fixed import FixedBitSet32


@dataclass(frozen=True)
class LabelSpace:
    """Ordered label names; label ``k`` is member ``k`` of a set.

    Examples:
        >>> space = LabelSpace.from_string("read,write,exec")
        >>> space.encode(["exec", "read"]).bits
        5
        >>> space.decode(FixedBitSet32(0b110))
        ['write', 'exec']
    """
    labels: tuple[str, ...]
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        labels = tuple(self.labels)
        if len(labels) > CAPACITY:
            raise ValueError(f"at most {CAPACITY} labels are supported, got {len(labels)}")
        positions: dict[str, int] = {}
        for idx, name in enumerate(labels):
            if not name:
                raise ValueError(f"label {idx} is empty")
            if name in positions:
                raise ValueError(f"duplicate label: {name}")
            positions[name] = idx
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "_positions", positions)

    @classmethod
    def from_string(cls, text: str, delimiter: str = ",") -> LabelSpace:
        """Split ``text`` on ``delimiter``; one trailing delimiter is allowed.

        Empty entries elsewhere are kept so validation rejects them.
        """
        parts = [part.strip() for part in text.split(delimiter)]
        if parts and not parts[-1]:
            parts.pop()
        return cls(tuple(parts))

    def __len__(self) -> int:
        return len(self.labels)

    def index(self, name: str) -> int:
        try:
            return self._positions[name]
        except KeyError:
            raise ValueError(f"unknown label: {name}") from None

    def encode(self, names: Iterable[str]) -> FixedBitSet32:
        return FixedBitSet32.from_indexes(self.index(name) for name in names)

    def decode(self, members: FixedBitSet32) -> list[str]:
        names: list[str] = []
        for idx in members:
            if idx >= len(self.labels):
                raise ValueError(f"member {idx} has no label (only {len(self.labels)} defined)")
            names.append(self.labels[idx])
        return names
