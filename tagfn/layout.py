"""Page layouts and macros expressed as ordinary higher-order functions."""

from __future__ import annotations

from functools import partial
from typing import Callable, Iterable, List, Sequence

from . import helpers as h

DOCTYPE = "<!DOCTYPE html>"


def fragment(*children: str) -> str:
    """Concatenate already-rendered parts."""

    return "".join(children)


def each(helper: Callable[[str], str], items: Iterable[str]) -> List[str]:
    """Apply a one-argument macro to every item, keeping order."""

    return [helper(item) for item in items]


def document(
    title: str,
    body: Sequence[str],
    *,
    lang: str = "en",
    head: Sequence[str] = (),
) -> str:
    """Render a complete page with a doctype, charset and title."""

    head_parts = [h.meta([h.charset("utf-8")]), h.title((), [title]), *head]
    page = h.html([h.lang(lang)], [h.head((), head_parts), h.body((), body)])
    return DOCTYPE + page


def extend(base: Callable[..., str], **slots) -> Callable[..., str]:
    """Derive a layout from ``base`` with some keyword slots pre-filled.

    Slots passed at call time override the pre-filled ones, so a chain of
    ``extend`` calls behaves like a chain of template blocks.
    """

    return partial(base, **slots)


__all__ = ["DOCTYPE", "document", "each", "extend", "fragment"]
