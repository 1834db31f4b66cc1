"""End-to-end CLI tests executed directly via :func:`wordbits.cli.main`."""

import argparse
import json
from pathlib import Path

import pytest

from wordbits import cli


def _write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def test_cli_show_json(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "0b01001010", "--format", "json"]) == 0
    payload = json.loads(capfd.readouterr().out)
    assert payload["members"] == [1, 3, 6]
    assert payload["count"] == 3


def test_cli_show_with_labels(capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["show", "5", "--labels", "read,write,exec"])
    text = capfd.readouterr().out
    assert "LABELS: read, exec" in text


def test_cli_members_and_dump(capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["members", "0x4a"])
    assert capfd.readouterr().out.strip() == "1 3 6"

    cli.main(["members", "0", "--format", "json"])
    assert json.loads(capfd.readouterr().out) == []

    cli.main(["dump", "5"])
    assert capfd.readouterr().out.strip() == "BitSet[1, 0, 1, zeros]"


def test_cli_merge_and_intersect(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    values = _write(tmp_path / "values.txt", "0b0110\n0b1100\n")
    cli.main(["merge", "0b0001", "--input", str(values), "--format", "json"])
    assert json.loads(capfd.readouterr().out)["value"] == 0b1111

    cli.main(["intersect", "--input", str(values), "--format", "json"])
    assert json.loads(capfd.readouterr().out)["members"] == [2]

    cli.main(["intersect", "--format", "json"])
    assert json.loads(capfd.readouterr().out)["value"] == 0xFFFFFFFF


def test_cli_encode_decode(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["encode", "--labels", "a,b,c", "c", "a", "--format", "json"])
    assert json.loads(capfd.readouterr().out)["value"] == 0b101

    labels = _write(tmp_path / "labels.txt", "a\nb\nc\n")
    out_path = tmp_path / "names.json"
    cli.main(["decode", "6", "--labels-file", str(labels), "--format", "json", "--out", str(out_path)])
    assert json.loads(out_path.read_text()) == ["b", "c"]


def test_cli_labels_with_gaps_are_rejected(tmp_path: Path) -> None:
    labels = _write(tmp_path / "labels.txt", "read\n\nexec\n")
    with pytest.raises(ValueError, match="empty"):
        cli.main(["decode", "4", "--labels-file", str(labels)])
    with pytest.raises(ValueError, match="empty"):
        cli.main(["encode", "--labels", "read,,exec", "exec"])


def test_wordbits_main_entrypoint(capfd: pytest.CaptureFixture[str]) -> None:
    from wordbits import main as wordbits_main

    assert wordbits_main(["members", "7"]) == 0
    assert capfd.readouterr().out.strip() == "0 1 2"


def test_cli_rejects_wide_values() -> None:
    with pytest.raises(SystemExit):
        cli.main(["show", "0x100000000"])


def test_parse_value_errors() -> None:
    from wordbits.cli import _parse_value

    with pytest.raises(argparse.ArgumentTypeError):
        _parse_value("-1")
