"""Command-line interface for tagfn."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .config import load_page, load_settings
from .escape import escape
from .io_utils import warn, write_html
from .verify import verify_markup


def _handle_render(args: argparse.Namespace) -> int:
    page = load_page(Path(args.input))
    settings = load_settings(Path(args.config)) if args.config else page.settings

    markup = page.to_html(settings)
    if settings.newline:
        markup += "\n"
    output_path = write_html(Path(args.output), markup, encoding=settings.encoding)

    if args.check:
        written = output_path.read_text(encoding=settings.encoding)
        errors = verify_markup(written, expected=page.root.tag_names())
        if errors:
            for message in errors:
                warn(f"{output_path}: {message}")
            return 1

    print(f"Rendered {page.root.tag} into {output_path}")
    return 0


def _handle_verify(args: argparse.Namespace) -> int:
    html_path = Path(args.input)
    if not html_path.exists():
        raise SystemExit(f"HTML file not found: {html_path}")

    expected = load_page(Path(args.page)).root.tag_names() if args.page else None
    errors = verify_markup(html_path.read_text(encoding="utf-8"), expected=expected)
    if errors:
        for message in errors:
            warn(f"{html_path}: {message}")
        return 1

    print(f"Verified markup in {html_path}")
    return 0


def _handle_escape(args: argparse.Namespace) -> int:
    if args.input:
        text = Path(args.input).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()
    sys.stdout.write(escape(text))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagfn",
        description="Render HTML from element documents built on plain functions",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tagfn {__version__}",
        help="Show the tagfn version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a page document to HTML.",
        description="Validate a YAML/JSON element document and write the rendered HTML.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the page document (YAML or JSON).",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        required=True,
        help="Path to write the rendered HTML.",
    )
    render_parser.add_argument(
        "--config",
        default=None,
        help="Settings file overriding the document's own settings.",
    )
    render_parser.add_argument(
        "--check",
        action="store_true",
        help="Re-parse the written HTML and fail if its elements differ from the document.",
    )
    render_parser.set_defaults(func=_handle_render)

    verify_parser = subparsers.add_parser(
        "verify",
        help="Audit an HTML file.",
        description="Parse an HTML file and report structural problems.",
    )
    verify_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the HTML file.",
    )
    verify_parser.add_argument(
        "--page",
        default=None,
        help="Page document whose element structure the HTML must match.",
    )
    verify_parser.set_defaults(func=_handle_verify)

    escape_parser = subparsers.add_parser(
        "escape",
        help="Escape text for safe embedding.",
        description="Escape &, <, >, and quotes from a file or stdin to stdout.",
    )
    escape_parser.add_argument(
        "--in",
        dest="input",
        default=None,
        help="File to escape (defaults to stdin).",
    )
    escape_parser.set_defaults(func=_handle_escape)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
