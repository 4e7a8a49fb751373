#!/usr/bin/env python3
"""Convert a yeast byte-code stream into a cross-linked tree/text HTML page.

Each input line is one record: a single code character followed by the
token text, as emitted by a YAML reference parser. Lines starting with '#'
are comments. The page shows a collapsible syntax tree next to the
reconstructed source text; clicking a leaf or a text span highlights its
counterpart in the other pane.

Usage:
    # Read from a file, write the page to stdout
    python3 scripts/yeast2html.py example.yeast > example.html

    # Read stdin, write a file, embed a custom stylesheet
    python3 scripts/yeast2html.py -o out/example.html -s yeast.css < example.yeast

    # Reference the stylesheet instead of embedding it
    python3 scripts/yeast2html.py -s yeast.css --link-stylesheet example.yeast

    # Dump the parsed document model as JSON
    python3 scripts/yeast2html.py --format json example.yeast

Options:
    -o, --output PATH        Output file (default: standard output).
    -s, --stylesheet PATH    Stylesheet embedded verbatim into the page
                             (default: a small built-in style).
    -l, --link-stylesheet    Emit a <link> to the stylesheet instead of
                             embedding it. Requires --stylesheet.
    --tree-title TEXT        Title of the tree pane (default: "Syntax Tree").
    --text-title TEXT        Title of the text pane (default: "YAML Text").
    --format {html,json}     Output format (default: html).
    -v, --verbose            Log progress to stderr.
    --man                    Print this manual and exit.

Exit status:
    0 on success. 1 on any error, after one "Error: ..." line on stderr:
    unknown, malformed or conflicting options, more than one input file, a line that is
    not a byte-code record, an unknown code, an end code that does not match
    the innermost open begin code, or an unreadable/unwritable file.
    Diagnostics carry the 1-based input line number.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from yeastview.errors import ConfigurationError, YeastError
from yeastview.interpreter import parse_lines
from yeastview.io_utils import dump_model_json, read_lines, write_output
from yeastview.page import DEFAULT_TEXT_TITLE, DEFAULT_TREE_TITLE, PageOptions, assemble_page


log = logging.getLogger("yeast2html")


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors as one-line configuration errors."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        description="Convert a yeast byte-code stream into a tree/text HTML page."
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        metavar="input",
        help="Byte-code input file (default: standard input)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Output file (default: stdout)"
    )
    parser.add_argument(
        "-s",
        "--stylesheet",
        type=Path,
        default=None,
        help="Stylesheet to embed (default: built-in style)",
    )
    parser.add_argument(
        "-l",
        "--link-stylesheet",
        action="store_true",
        help="Link to --stylesheet instead of embedding it",
    )
    parser.add_argument("--tree-title", default=DEFAULT_TREE_TITLE, help="Tree pane title")
    parser.add_argument("--text-title", default=DEFAULT_TEXT_TITLE, help="Text pane title")
    parser.add_argument(
        "--format",
        choices=("html", "json"),
        default="html",
        help="Output an HTML page or the parsed document model as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--man", action="store_true", help="Print the full manual and exit")
    return parser


def run(args: argparse.Namespace) -> None:
    if len(args.inputs) > 1:
        raise ConfigurationError(
            f"expected at most one input file, got {len(args.inputs)}"
        )
    options = PageOptions(
        tree_title=args.tree_title,
        text_title=args.text_title,
        stylesheet=args.stylesheet,
        link_stylesheet=args.link_stylesheet,
    )
    input_path: Path | None = args.inputs[0] if args.inputs else None

    lines = read_lines(input_path)
    log.info("read %d lines from %s", len(lines), input_path or "<stdin>")
    model = parse_lines(lines)
    log.info(
        "parsed %d entries (%d scope(s) left open)", len(model), len(model.open_scopes)
    )

    if args.format == "json":
        output = dump_model_json(model)
    else:
        output = assemble_page(model, options)
    write_output(output, args.output)
    log.info("wrote %s", args.output or "<stdout>")


def main(argv: list[str] | None = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.man:
        print(__doc__)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        run(args)
    except YeastError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
