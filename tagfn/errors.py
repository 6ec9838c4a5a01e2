"""Exception types raised by tagfn."""

from __future__ import annotations


class TagfnError(Exception):
    """Base class for tagfn errors."""


class InvalidTagName(TagfnError, ValueError):
    """Raised when a tag name cannot be embedded in markup as-is."""

    def __init__(self, tag: object, reason: str) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f"Invalid tag name {tag!r}: {reason}")


__all__ = ["InvalidTagName", "TagfnError"]
