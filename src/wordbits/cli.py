"""Command line interface for the wordbits bit set tool."""
from __future__ import annotations

import argparse
from collections.abc import Sequence

from . import io
from .engine.fixed import FixedBitSet32
from .engine.labels import LabelSpace
from .engine.models import SetReport


def _parse_value(value: str) -> int:
    """Parse a raw word argument, ensuring it fits in 32 bits."""
    try:
        return io.parse_value(value)
    except (TypeError, ValueError) as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordbits", description="32-member bit set CLI")
    parser.add_argument("-V", "--version", action="version", version="wordbits 0.1")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_output_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--format", choices=["text", "json"], default="text")
        cmd.add_argument("--out", default="-")

    def add_label_options(cmd: argparse.ArgumentParser, required: bool = False) -> None:
        group = cmd.add_mutually_exclusive_group(required=required)
        group.add_argument("--labels", help="comma separated label names, label k is member k")
        group.add_argument("--labels-file", help="file with one label name per line")

    show = sub.add_parser("show", help="report on a raw value")
    show.add_argument("value", type=_parse_value)
    add_label_options(show)
    add_output_options(show)

    members = sub.add_parser("members", help="list member indexes in ascending order")
    members.add_argument("value", type=_parse_value)
    add_output_options(members)

    dump = sub.add_parser("dump", help="render the debug dump of a value")
    dump.add_argument("value", type=_parse_value)
    add_output_options(dump)

    for name, help_text in (("merge", "union of values"), ("intersect", "intersection of values")):
        fold = sub.add_parser(name, help=help_text)
        fold.add_argument("values", nargs="*", type=_parse_value)
        fold.add_argument("--input", help="file of values (text, jsonl or csv)")
        add_label_options(fold)
        add_output_options(fold)

    encode = sub.add_parser("encode", help="convert label names to a value")
    encode.add_argument("names", nargs="*")
    add_label_options(encode, required=True)
    add_output_options(encode)

    decode = sub.add_parser("decode", help="convert a value to label names")
    decode.add_argument("value", type=_parse_value)
    add_label_options(decode, required=True)
    add_output_options(decode)
    return parser


def _label_space(args: argparse.Namespace) -> LabelSpace | None:
    if getattr(args, "labels", None):
        return LabelSpace.from_string(args.labels)
    if getattr(args, "labels_file", None):
        return LabelSpace(tuple(io.read_labels(args.labels_file)))
    return None


def _emit_report(report: SetReport, args: argparse.Namespace) -> None:
    if args.format == "json":
        io.write_json(report.to_json(), args.out)
    else:
        io.write_text(report.to_text() + "\n", args.out)


def _command_show(args: argparse.Namespace) -> None:
    report = SetReport.build(FixedBitSet32(args.value), _label_space(args))
    _emit_report(report, args)


def _command_members(args: argparse.Namespace) -> None:
    indexes = list(FixedBitSet32(args.value).drain())
    if args.format == "json":
        io.write_json(indexes, args.out)
    else:
        io.write_text(" ".join(str(idx) for idx in indexes) + "\n", args.out)


def _command_dump(args: argparse.Namespace) -> None:
    text = str(FixedBitSet32(args.value))
    if args.format == "json":
        io.write_json({"dump": text}, args.out)
    else:
        io.write_text(text + "\n", args.out)


def _command_fold(args: argparse.Namespace) -> None:
    values = list(args.values)
    if args.input:
        values.extend(io.read_items(args.input))
    if args.command == "merge":
        result = FixedBitSet32.zero()
        for value in values:
            result = result.merge(FixedBitSet32(value))
    else:
        result = FixedBitSet32.full()
        for value in values:
            result = result.intersect(FixedBitSet32(value))
    _emit_report(SetReport.build(result, _label_space(args)), args)


def _command_encode(args: argparse.Namespace) -> None:
    space = _label_space(args)
    _emit_report(SetReport.build(space.encode(args.names), space), args)


def _command_decode(args: argparse.Namespace) -> None:
    space = _label_space(args)
    names = space.decode(FixedBitSet32(args.value))
    if args.format == "json":
        io.write_json(names, args.out)
    else:
        io.write_text("\n".join(names) + "\n", args.out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    command = args.command
    if command == "show":
        _command_show(args)
    elif command == "members":
        _command_members(args)
    elif command == "dump":
        _command_dump(args)
    elif command in {"merge", "intersect"}:
        _command_fold(args)
    elif command == "encode":
        _command_encode(args)
    elif command == "decode":
        _command_decode(args)
    else:
        parser.error(f"unknown command {command}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
