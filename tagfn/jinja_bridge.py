"""Expose the element helpers inside Jinja templates.

Inside templates the helpers follow markupsafe rules: children and attribute
values that are already ``Markup`` pass through, plain strings are escaped,
and every tag helper returns ``Markup``. Outside Jinja, ``render`` stays
unescaped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup, escape

from .helpers import attribute, attribute_helpers, data, element, tag_helpers


def _as_markup(helper: Callable[..., str]) -> Callable[..., Markup]:
    def wrapper(attributes=(), children=()):
        attrs = [(name, str(escape(value))) for name, value in attributes]
        return Markup(helper(attrs, [str(escape(child)) for child in children]))

    return wrapper


def dsl_globals() -> Dict[str, Any]:
    namespace: Dict[str, Any] = {tag: _as_markup(helper) for tag, helper in tag_helpers().items()}
    namespace.update(attribute_helpers())
    namespace["attribute"] = attribute
    namespace["data"] = data
    namespace["element"] = lambda tag: _as_markup(element(tag))
    return namespace


def make_environment(templates_dir: Path) -> Environment:
    """Create a Jinja environment with the DSL helpers installed as globals."""

    env = Environment(
        loader=FileSystemLoader([templates_dir]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals.update(dsl_globals())
    return env


__all__ = ["dsl_globals", "make_environment"]
