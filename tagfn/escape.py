"""Opt-in escaping layered on top of the element builder.

``render`` never escapes. These helpers are applied by the caller, before the
text reaches the builder.
"""

from __future__ import annotations

import html
from functools import wraps
from typing import Iterable, List

from .element import AttributePair
from .helpers import ElementHelper


def escape(text: str) -> str:
    """Replace ``&``, ``<``, ``>``, ``"`` and ``'`` with entity references."""

    return html.escape(str(text), quote=True)


def escape_attributes(attributes: Iterable[AttributePair]) -> List[AttributePair]:
    return [(name, escape(value)) for name, value in attributes]


def escape_children(children: Iterable[str]) -> List[str]:
    return [escape(child) for child in children]


def safe(helper: ElementHelper) -> ElementHelper:
    """Wrap an element helper so its attribute values and children are escaped.

    Children that are themselves rendered elements get escaped too, so nest
    ``safe`` helpers only around leaf text.
    """

    @wraps(helper)
    def wrapper(attributes: Iterable[AttributePair] = (), children: Iterable[str] = ()) -> str:
        return helper(escape_attributes(attributes), escape_children(children))

    return wrapper


__all__ = ["escape", "escape_attributes", "escape_children", "safe"]
