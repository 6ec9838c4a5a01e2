import pytest

from tagfn import InvalidTagName, attribute, data, element, render
from tagfn import helpers as h


def test_blog_example():
    out = h.div([], [h.p([], ["Hello"]), h.a([h.href("https://example.com")], ["link"])])
    assert out == '<div><p>Hello</p><a href="https://example.com">link</a></div>'


@pytest.mark.parametrize(
    "attrs,children",
    [
        ([], []),
        ([("id", "main")], ["text"]),
        ([("class", "a"), ("class", "b")], ["<b>x</b>", "y"]),
    ],
)
def test_element_matches_render(attrs, children):
    div = element("div")
    assert div(attrs, children) == render("div", attrs, children)
    assert h.div(attrs, children) == render("div", attrs, children)


def test_element_keyword_arguments():
    assert h.p(attributes=[h.cls("lead")], children=["x"]) == '<p class="lead">x</p>'


def test_element_rejects_bad_tag_eagerly():
    with pytest.raises(InvalidTagName):
        element("")


def test_attribute_helper_returns_pair():
    assert attribute("href")("/home") == ("href", "/home")
    assert h.cls("card") == ("class", "card")
    assert h.id_("top") == ("id", "top")
    assert h.type_("submit") == ("type", "submit")
    assert data("user-id")("42") == ("data-user-id", "42")


def test_attribute_helpers_compose_with_render():
    out = render("img", [h.src("/a.png"), h.alt("A")], [])
    assert out == '<img src="/a.png" alt="A"></img>'


def test_tag_helpers_cover_every_tag_name():
    helpers = h.tag_helpers()
    assert list(helpers) == list(h.TAG_NAMES)
    for tag, helper in helpers.items():
        assert helper() == f"<{tag}></{tag}>"


def test_attribute_helpers_map_names():
    helpers = h.attribute_helpers()
    for helper_name, attr_name in h.ATTRIBUTE_NAMES.items():
        assert helpers[helper_name]("v") == (attr_name, "v")
