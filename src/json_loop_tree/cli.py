"""Command-line entry point: load a document, build its tree, print it.

Usage::

    json-loop-tree sample.json
    json-loop-tree https://example.com/tree.json --format json
    cat sample.json | json-loop-tree -

Exit codes: 0 on success, 1 for an invalid document, 2 when the document
cannot be loaded.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from json_loop_tree.api import parse
from json_loop_tree.config import BuilderConfig
from json_loop_tree.errors import ConfigError, DocumentLoadError
from json_loop_tree.loader import load_document
from json_loop_tree.printer import render_lines

__all__ = ["main"]

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_FAILED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-loop-tree",
        description="Flatten a nested loop-tree JSON document and print it.",
    )
    parser.add_argument("source", help="File path, http(s) URL, or - for stdin")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Reject documents nested deeper than this many named nodes",
    )
    parser.add_argument(
        "--separator",
        default=".",
        help="Separator for error paths (default: .)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def run(
    source: str,
    output_format: str = "text",
    config: BuilderConfig | None = None,
) -> tuple[int, str]:
    """Load and build ``source``; return (exit_code, output_or_error_text)."""
    try:
        document = load_document(sys.stdin if source == "-" else source)
    except DocumentLoadError as exc:
        return EXIT_LOAD_FAILED, f"error: {exc}"

    try:
        tree = parse(document, config)
    except ConfigError as exc:
        return EXIT_INVALID, f"error: {exc}"

    if output_format == "json":
        return EXIT_OK, json.dumps(tree.as_dict(), indent=2)
    return EXIT_OK, "\n".join(render_lines(tree))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Parses args, calls run(), prints once, exits."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = BuilderConfig(path_separator=args.separator, max_depth=args.max_depth)
    except ValueError as exc:
        parser.error(str(exc))

    exit_code, output = run(args.source, args.format, config)
    print(output, file=sys.stdout if exit_code == EXIT_OK else sys.stderr)
    return exit_code
