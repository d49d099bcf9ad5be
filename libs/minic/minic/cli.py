"""Command-line driver: read a source file and run the whole pipeline.

Usage:
    minic [SOURCE] [--config PATH] [--legacy] [--escape] [--show-locations] [--no-trace]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from minic.config import ConfigError, PipelineConfig, load_config
from minic.pipeline import run_pipeline

DEFAULT_SOURCE = "input.c"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minic",
        description="Tokenize, parse, trace and serialize a minic source file",
    )
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE, help="Source file to analyze")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument(
        "--legacy",
        action="store_true",
        default=None,
        help="Treat punctuation as unknown and stop tokenizing at the first one",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        default=None,
        help="JSON-escape strings in the serialized AST",
    )
    parser.add_argument(
        "--show-locations",
        action="store_true",
        default=None,
        help="Prefix diagnostics with file:line:column and severity",
    )
    parser.add_argument(
        "--no-trace",
        dest="trace",
        action="store_false",
        default=None,
        help="Do not print the node trace",
    )
    return parser


def read_source(path: str) -> str | None:
    """Read the whole source buffer, or return None if it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else PipelineConfig()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    config = config.override(
        legacy=args.legacy,
        escape=args.escape,
        show_locations=args.show_locations,
        trace=args.trace,
    )

    source = read_source(args.source)
    if source is None:
        print("Failed to open input file.", file=sys.stderr)
        return 1

    result = run_pipeline(source, args.source, config)

    for line in result.diagnostic_lines(config.show_locations):
        print(line, file=sys.stderr)
    if config.trace:
        for line in result.trace:
            print(line)
    print(f"Serialized AST: {result.serialized}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
