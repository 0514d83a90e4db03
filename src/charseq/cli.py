"""Command-line entry point: validate brackets, encode and decode runs."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .brackets import POLICIES, check_brackets
from .config import apply_config_file, locate_config
from .rle import RLEDecodeError, decode, encode, frequency_encode

COMMANDS: tuple[str, ...] = ("validate", "encode", "decode")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charseq",
        description="Bracket validation and run-length coding of character sequences.",
        epilog="Put -- before TEXT when it starts with '-': charseq encode -- -ab",
    )
    parser.add_argument("command", choices=COMMANDS, help="Operation to run")
    parser.add_argument("text", help="Input character sequence (after -- if it starts with '-')")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML/JSON config file. CLI args override values from this file.",
    )
    parser.add_argument(
        "--policy",
        type=str,
        choices=POLICIES,
        default="reject",
        help="validate: how to treat characters outside ()[]{}",
    )
    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="validate: print the full report as JSON",
    )
    parser.add_argument(
        "--frequency",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="encode: merge runs into per-character totals",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = _build_parser()
    config_path = locate_config(argv)
    if config_path is not None:
        apply_config_file(parser, config_path)
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    if args.command == "validate":
        report = check_brackets(args.text, policy=args.policy)
        if args.json:
            print(json.dumps(report.to_dict()))
        else:
            print("valid" if report.ok else "invalid")
        return 0 if report.ok else 1

    if args.command == "encode":
        print(frequency_encode(args.text) if args.frequency else encode(args.text))
        return 0

    try:
        print(decode(args.text))
    except RLEDecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
