"""Command-line interface for the mdfold library.

Reads a markdown file, optionally pushes its headings down and checks its
internal links, and writes it back out as normalised markdown, HTML, its
words or its heading anchors.

Examples
--------
Normalise a file:
    $ mdfold README.md

Render HTML with heading ids, failing on broken ``#fragment`` links:
    $ mdfold README.md --to html --heading-ids --check-anchors

List heading anchors as a table:
    $ mdfold README.md --to anchors --rich

Exit codes: 0 on success, 1 when anchor validation fails, 2 when the input
cannot be read or parsed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mdfold.ast.nodes import Node
from mdfold.ast.recursion import fold
from mdfold.ast.transforms import bump_document_headings, concat_words, extract_document_words
from mdfold.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TABLE_STYLE,
    EXIT_ANCHOR_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_SUCCESS,
    LOG_LEVELS,
    OUTPUT_FORMATS,
    TABLE_STYLE_NAMES,
)
from mdfold.exceptions import MdfoldError
from mdfold.logging_utils import configure_logging
from mdfold.options.html import HtmlRendererOptions
from mdfold.options.markdown import MarkdownRendererOptions
from mdfold.parsers.markdown import parse_markdown
from mdfold.renderers.html import HtmlRenderer, render_html
from mdfold.renderers.markdown import render_markdown
from mdfold.result import Err
from mdfold.validation.anchors import Validated, format_anchor_error, lift, lift_with_anchor, resolve

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdfold`` command."""
    parser = argparse.ArgumentParser(
        prog="mdfold",
        description="Transform markdown documents: normalise, render to HTML, extract words and anchors.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Markdown file to read ('-' for stdin)")
    parser.add_argument(
        "--to",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output: normalised markdown, an HTML fragment, the words, or the heading anchors",
    )
    parser.add_argument(
        "--table-style",
        choices=TABLE_STYLE_NAMES,
        default=DEFAULT_TABLE_STYLE,
        help=MarkdownRendererOptions.__dataclass_fields__["table_style"].metadata["help"],
    )
    parser.add_argument("--bump", type=int, default=0, metavar="N", help="Push every heading down N levels (max h6)")
    parser.add_argument(
        "--heading-ids",
        action="store_true",
        help=HtmlRendererOptions.__dataclass_fields__["heading_ids"].metadata["help"],
    )
    parser.add_argument(
        "--check-anchors",
        action="store_true",
        help="Fail when headings share an anchor or a #fragment link matches no heading",
    )
    parser.add_argument("--rich", action="store_true", help="Pretty-print output in the terminal")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def read_input(source: str) -> str:
    """Read markdown from a path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def check_anchors(validated: list[Validated[None]], use_rich: bool) -> Optional[str]:
    """Resolve phase-1 anchor values; return a message when validation fails."""
    result = resolve(validated)
    if not isinstance(result, Err):
        return None
    anchors = concat_words([value.generated_anchors for value in validated])
    message = format_anchor_error(result.error, anchors)
    if use_rich:
        from rich.console import Console

        Console(stderr=True).print(f"[bold red]Anchor error:[/bold red] {message}")
    else:
        print(f"Anchor error: {message}", file=sys.stderr)
    return message


def render_validated_html(nodes: list[Node], options: HtmlRendererOptions) -> str:
    """Render HTML in the validation pass, so heading ids are the anchors links were checked against.

    Only call this once the document is known to validate.
    """
    renderer = HtmlRenderer(options)
    rendered = resolve([fold(lift_with_anchor(renderer.render_with_anchor), node) for node in nodes]).unwrap()
    return "\n".join(str(element) for element in rendered)


def print_lines(title: str, lines: list[str], use_rich: bool) -> None:
    """Print one item per line, or as a single-column table with ``--rich``."""
    if use_rich:
        from rich.console import Console
        from rich.table import Table

        table = Table(title=title)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column(title.capitalize(), style="magenta")
        for index, line in enumerate(lines, start=1):
            table.add_row(str(index), line)
        Console().print(table)
    else:
        for line in lines:
            print(line)


def print_document(text: str, output_format: str, use_rich: bool) -> None:
    """Print rendered markdown or HTML."""
    if use_rich:
        from rich.console import Console
        from rich.syntax import Syntax

        lexer = "html" if output_format == "html" else "markdown"
        Console().print(Syntax(text, lexer))
    else:
        sys.stdout.write(text if text.endswith("\n") or not text else text + "\n")


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        text = read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        nodes = parse_markdown(text)
    except MdfoldError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    logger.debug("Parsed %d top-level blocks from %s", len(nodes), parsed_args.input)

    if parsed_args.bump:
        nodes = bump_document_headings(parsed_args.bump, nodes)

    validated = [fold(lift(lambda _block: None), node) for node in nodes]
    if parsed_args.check_anchors and check_anchors(validated, parsed_args.rich) is not None:
        return EXIT_ANCHOR_ERROR

    output_format = parsed_args.to
    if output_format == "words":
        print_lines("words", extract_document_words(nodes), parsed_args.rich)
    elif output_format == "anchors":
        print_lines("anchors", concat_words([value.generated_anchors for value in validated]), parsed_args.rich)
    elif output_format == "html":
        html_options = HtmlRendererOptions(heading_ids=parsed_args.heading_ids)
        if parsed_args.heading_ids and parsed_args.check_anchors:
            html = render_validated_html(nodes, html_options)
        else:
            html = render_html(nodes, html_options)
        print_document(html, output_format, parsed_args.rich)
    else:
        markdown = render_markdown(nodes, MarkdownRendererOptions(table_style=parsed_args.table_style))
        print_document(markdown, output_format, parsed_args.rich)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
