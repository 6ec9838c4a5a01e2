"""Build the example page from the helpers and audit the result."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tagfn import escape, extend, fragment
from tagfn import helpers as h
from tagfn.io_utils import write_html
from tagfn.layout import document, each
from tagfn.verify import verify_markup


def nav_link(label: str, target: str) -> str:
    return h.li((), [h.a([h.href(target)], [escape(label)])])


def page(*, title: str, heading: str, body: list[str], links: list[tuple[str, str]]) -> str:
    return document(
        title,
        [
            h.header((), [h.nav((), [h.ul([h.cls("menu")], [nav_link(*item) for item in links])])]),
            h.main((), [h.h1((), [escape(heading)]), *body]),
            h.footer((), [h.p((), ["Built with plain functions."])]),
        ],
    )


blog_page = extend(page, links=[("Home", "/"), ("Archive", "/archive/")])


def build_example() -> str:
    paragraphs = [
        "Templates are just functions.",
        "Partial application gives you one helper per tag.",
        "Escaping is a separate step you choose.",
    ]
    return blog_page(
        title="Functions as templates",
        heading="Functions as templates",
        body=[
            h.article((), each(lambda text: h.p((), [escape(text)]), paragraphs)),
            fragment(h.pre((), [h.code((), [escape('div = partial(render, "div")')])])),
        ],
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the example blog page.")
    parser.add_argument("--out", required=True, type=Path, help="Path to write the HTML page")
    args = parser.parse_args(argv)

    markup = build_example()
    errors = verify_markup(markup)
    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 1

    write_html(args.out, markup + "\n")
    print(f"Wrote example page to {args.out}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
