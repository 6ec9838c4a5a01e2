"""Per-tag and per-attribute shorthands built by partial application."""

from __future__ import annotations

from functools import partial
from typing import Callable

from .element import AttributePair, render, validate_tag_name

ElementHelper = Callable[..., str]
AttributeHelper = Callable[[str], AttributePair]


def element(tag: str) -> ElementHelper:
    """Fix the tag of ``render`` and return ``(attributes, children) -> str``."""

    return partial(render, validate_tag_name(tag))


def _pair(name: str, value: str) -> AttributePair:
    return (name, value)


def attribute(name: str) -> AttributeHelper:
    """Fix an attribute name and return ``(value) -> (name, value)``."""

    return partial(_pair, name)


def data(key: str) -> AttributeHelper:
    return attribute(f"data-{key}")


TAG_NAMES = (
    "html",
    "head",
    "body",
    "title",
    "meta",
    "link",
    "script",
    "style",
    "div",
    "span",
    "p",
    "a",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "li",
    "em",
    "strong",
    "code",
    "pre",
    "section",
    "article",
    "header",
    "footer",
    "nav",
    "main",
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
    "form",
    "label",
    "button",
    "img",
    "blockquote",
)

# Python-safe helper name -> attribute name.
ATTRIBUTE_NAMES = {
    "href": "href",
    "src": "src",
    "alt": "alt",
    "cls": "class",
    "id_": "id",
    "name": "name",
    "rel": "rel",
    "lang": "lang",
    "type_": "type",
    "charset": "charset",
    "content": "content",
    "style_attr": "style",
    "title_attr": "title",
}

html = element("html")
head = element("head")
body = element("body")
title = element("title")
meta = element("meta")
link = element("link")
script = element("script")
style = element("style")
div = element("div")
span = element("span")
p = element("p")
a = element("a")
h1 = element("h1")
h2 = element("h2")
h3 = element("h3")
h4 = element("h4")
h5 = element("h5")
h6 = element("h6")
ul = element("ul")
ol = element("ol")
li = element("li")
em = element("em")
strong = element("strong")
code = element("code")
pre = element("pre")
section = element("section")
article = element("article")
header = element("header")
footer = element("footer")
nav = element("nav")
main = element("main")
table = element("table")
thead = element("thead")
tbody = element("tbody")
tr = element("tr")
th = element("th")
td = element("td")
form = element("form")
label = element("label")
button = element("button")
img = element("img")
blockquote = element("blockquote")

href = attribute("href")
src = attribute("src")
alt = attribute("alt")
cls = attribute("class")
id_ = attribute("id")
name = attribute("name")
rel = attribute("rel")
lang = attribute("lang")
type_ = attribute("type")
charset = attribute("charset")
content = attribute("content")
style_attr = attribute("style")
title_attr = attribute("title")


def tag_helpers() -> dict[str, ElementHelper]:
    """Return the predefined tag helpers keyed by tag name."""

    module_globals = globals()
    return {tag: module_globals[tag] for tag in TAG_NAMES}


def attribute_helpers() -> dict[str, AttributeHelper]:
    """Return the predefined attribute helpers keyed by helper name."""

    module_globals = globals()
    return {helper: module_globals[helper] for helper in ATTRIBUTE_NAMES}


__all__ = [
    "ATTRIBUTE_NAMES",
    "TAG_NAMES",
    "attribute",
    "attribute_helpers",
    "data",
    "element",
    "tag_helpers",
    *TAG_NAMES,
    *ATTRIBUTE_NAMES,
]
