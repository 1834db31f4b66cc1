"""Input/output helpers for the wordbits CLI."""
import csv
import json
import os
import sys
from typing import TextIO

from .engine.bitset import check_word


def parse_value(text: str) -> int:
    """Parse an integer literal (``42``, ``0b1010``, ``0x1f``) into a 32-bit word."""
    try:
        value = int(text.strip().replace("_", ""), 0)
    except ValueError:
        raise ValueError(f"invalid integer literal: {text!r}") from None
    return check_word(value)


def _coerce(raw: object) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return check_word(raw)
    return parse_value(str(raw))


def _read_text_lines(handle: TextIO) -> list[int]:
    return [parse_value(line) for line in handle if line.strip() and not line.lstrip().startswith("#")]


def _read_jsonl(handle: TextIO) -> list[int]:
    data: list[int] = []
    for raw in handle:
        raw = raw.strip()
        if not raw:
            continue
        obj = json.loads(raw)
        if isinstance(obj, dict) and "value" in obj:
            value = obj["value"]
        else:
            value = obj
        data.append(_coerce(value))
    return data


def _read_csv(handle: TextIO, column: str = "value") -> list[int]:
    reader = csv.DictReader(handle)
    fieldnames = reader.fieldnames or []
    if column not in fieldnames:
        raise ValueError(f"CSV missing required column '{column}'")
    return [parse_value(row[column]) for row in reader if row.get(column)]


_READERS = {
    ".json": _read_jsonl,
    ".jsonl": _read_jsonl,
    ".csv": _read_csv,
}


def read_items(path: str) -> list[int]:
    """Read raw words from a text, JSON lines or CSV file, chosen by extension."""
    _, ext = os.path.splitext(path)
    reader = _READERS.get(ext.lower(), _read_text_lines)
    with open(path, encoding="utf-8", newline="") as handle:
        return reader(handle)


def read_labels(path: str) -> list[str]:
    """Read one label per line; line ``k`` names member ``k``.

    Trailing blank lines are ignored. Blank lines before the last label are kept
    as empty names so :class:`LabelSpace` rejects them instead of shifting positions.
    """
    with open(path, encoding="utf-8") as handle:
        labels = [line.strip() for line in handle]
    while labels and not labels[-1]:
        labels.pop()
    return labels


def write_text(text: str, path: str) -> None:
    if not text.endswith("\n"):
        text += "\n"
    if path == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def write_json(obj: object, path: str) -> None:
    write_text(json.dumps(obj, indent=2, sort_keys=True), path)
