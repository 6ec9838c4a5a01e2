"""Pydantic models for declarative element documents and render settings."""

from __future__ import annotations

import codecs
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .element import render, validate_tag_name
from .escape import escape, escape_attributes
from .layout import DOCTYPE


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class RenderSettings(BaseModel):
    """Options applied when rendering documents from the command line."""

    escape_text: bool = Field(
        False,
        alias="escapeText",
        description="Escape string children and attribute values before rendering.",
    )
    doctype: bool = Field(False, description="Prefix the output with <!DOCTYPE html>.")
    encoding: str = Field("utf-8", description="Encoding used for written files.")
    newline: bool = Field(True, description="Terminate written files with a newline.")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {value!r}") from exc
        return value


class ElementSpec(BaseModel):
    """One element of a document: a tag, ordered attributes and children."""

    tag: str = Field(..., description="Tag name, embedded unescaped.")
    attributes: List[Tuple[str, str]] = Field(
        default_factory=list,
        description="Ordered name/value pairs; a mapping is accepted in insertion order.",
    )
    children: List[Union[str, "ElementSpec"]] = Field(
        default_factory=list, description="Text children or nested elements."
    )
    escape: Optional[bool] = Field(
        None,
        description="Override the settings' escapeText for this element and its descendants.",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: str) -> str:
        return validate_tag_name(value)

    @field_validator("attributes", mode="before")
    @classmethod
    def _normalize_attributes(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = list(value.items())
        if isinstance(value, list):
            return [
                tuple(_scalar_to_str(part) for part in pair) if isinstance(pair, (list, tuple)) else pair
                for pair in value
            ]
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _normalize_children(cls, value: Any) -> Any:
        if isinstance(value, (str, dict)):
            value = [value]
        if isinstance(value, list):
            return [_scalar_to_str(child) for child in value]
        return value

    def _render(self, escape_text: bool) -> str:
        if self.escape is not None:
            escape_text = self.escape
        parts: List[str] = []
        for child in self.children:
            if isinstance(child, ElementSpec):
                parts.append(child._render(escape_text))
            elif escape_text:
                parts.append(escape(child))
            else:
                parts.append(child)
        attributes = escape_attributes(self.attributes) if escape_text else self.attributes
        return render(self.tag, attributes, parts)

    def to_html(self, settings: RenderSettings | None = None) -> str:
        settings = settings or RenderSettings()
        return self._render(settings.escape_text)

    def tag_names(self) -> List[str]:
        """Tag names in document order (pre-order)."""

        names = [self.tag]
        for child in self.children:
            if isinstance(child, ElementSpec):
                names.extend(child.tag_names())
        return names


ElementSpec.model_rebuild()


class PageDocument(BaseModel):
    """A page file: optional settings plus the root element."""

    settings: RenderSettings = Field(default_factory=RenderSettings)
    root: ElementSpec

    def to_html(self, settings: RenderSettings | None = None) -> str:
        settings = settings or self.settings
        markup = self.root.to_html(settings)
        if settings.doctype:
            markup = DOCTYPE + markup
        return markup


__all__ = ["ElementSpec", "PageDocument", "RenderSettings"]
