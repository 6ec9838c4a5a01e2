"""Build HTML from plain functions: string concatenation plus partial application."""

from .element import AttributePair, render, validate_tag_name
from .errors import InvalidTagName, TagfnError
from .escape import escape, escape_attributes, escape_children, safe
from .helpers import attribute, data, element
from .layout import document, each, extend, fragment

__version__ = "0.1.0"

__all__ = [
    "AttributePair",
    "InvalidTagName",
    "TagfnError",
    "attribute",
    "data",
    "document",
    "each",
    "element",
    "escape",
    "escape_attributes",
    "escape_children",
    "extend",
    "fragment",
    "render",
    "safe",
    "validate_tag_name",
]
