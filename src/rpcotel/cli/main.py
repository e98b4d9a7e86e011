"""Command line interface for rpcotel."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import cast

from .inspect_cmd import VerbosityArg, run_inspect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rpcotel")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Resolve the config against the process-wide defaults and print it"
    )
    inspect_parser.add_argument(
        "--no-stack-trace",
        action="store_true",
        help="Resolve with stack traces on errors disabled",
    )
    inspect_parser.add_argument(
        "--record-source-operation",
        action="store_true",
        help="Resolve with the source operation metric dimension enabled",
    )
    inspect_parser.add_argument(
        "--verbosity",
        choices=["minimal", "standard", "full"],
        default="standard",
        help="Console render verbosity",
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable summary JSON instead of text output",
    )
    inspect_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output file path for --json summary",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "inspect":
        return run_inspect(
            cast(VerbosityArg, args.verbosity),
            stack_trace=not args.no_stack_trace,
            record_source_operation=args.record_source_operation,
            as_json=args.json,
            output_path=args.output,
        )

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
