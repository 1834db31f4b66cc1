"""Data models shared across the wordbits engine."""
from __future__ import annotations

from dataclasses import dataclass

from .fixed import FixedBitSet32
from .labels import LabelSpace


@dataclass(frozen=True)
class SetReport:
    value: int
    hex: str
    members: list[int]
    count: int
    dump: str
    labels: list[str] | None = None

    @classmethod
    def build(cls, members: FixedBitSet32, space: LabelSpace | None = None) -> SetReport:
        return cls(
            value=members.bits,
            hex=f"{members.bits:#010x}",
            members=members.members(),
            count=len(members),
            dump=str(members),
            labels=space.decode(members) if space is not None else None,
        )

    def to_json(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "value": self.value,
            "hex": self.hex,
            "members": list(self.members),
            "count": self.count,
            "dump": self.dump,
        }
        if self.labels is not None:
            payload["labels"] = list(self.labels)
        return payload

    def to_text(self) -> str:
        lines = [
            f"VALUE: {self.value} ({self.hex})",
            f"MEMBERS: {', '.join(str(idx) for idx in self.members) or '-'}",
            f"COUNT: {self.count}",
            f"DUMP: {self.dump}",
        ]
        if self.labels is not None:
            lines.append(f"LABELS: {', '.join(self.labels) or '-'}")
        return "\n".join(lines)
