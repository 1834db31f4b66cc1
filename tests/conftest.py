"""Test configuration ensuring local packages are importable."""

from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for path in (SRC,):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)
