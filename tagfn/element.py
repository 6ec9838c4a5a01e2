"""Render a single HTML element from a tag, attribute pairs and children.

The builder is a pure assembler: nothing passed in is escaped. Use
``tagfn.escape`` on untrusted text before handing it over.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .errors import InvalidTagName

AttributePair = Tuple[str, str]

_FORBIDDEN_TAG_CHARS = frozenset("<>/")


def validate_tag_name(tag: str) -> str:
    """Return ``tag`` unchanged or raise InvalidTagName."""

    if not isinstance(tag, str):
        raise InvalidTagName(tag, "tag name must be a string")
    if not tag:
        raise InvalidTagName(tag, "tag name must not be empty")
    for char in tag:
        if char.isspace():
            raise InvalidTagName(tag, "tag name must not contain whitespace")
        if char in _FORBIDDEN_TAG_CHARS:
            raise InvalidTagName(tag, f"tag name must not contain {char!r}")
    return tag


def _render_attrs(attributes: Iterable[AttributePair]) -> str:
    # Duplicates are kept in the order given.
    return "".join(f' {name}="{value}"' for name, value in attributes)


def render(
    tag: str,
    attributes: Iterable[AttributePair] = (),
    children: Iterable[str] = (),
) -> str:
    """Render ``<tag attrs>children</tag>``.

    Attributes are emitted as `` name="value"`` in the order given, children
    are concatenated with no separator. An element without children still
    gets a closing tag.
    """

    validate_tag_name(tag)
    return f"<{tag}{_render_attrs(attributes)}>{''.join(children)}</{tag}>"


__all__ = ["AttributePair", "InvalidTagName", "render", "validate_tag_name"]
