import pytest
from pydantic import ValidationError

from tagfn.models import ElementSpec, PageDocument, RenderSettings


def _card() -> ElementSpec:
    return ElementSpec.model_validate(
        {
            "tag": "div",
            "attributes": {"class": "card", "data-n": 3},
            "children": [
                {"tag": "h2", "children": ["Title & <more>"]},
                "raw <b>bold</b>",
                {"tag": "p", "children": "single", "escape": True},
            ],
        }
    )


def test_mapping_attributes_keep_insertion_order():
    card = _card()
    assert card.attributes == [("class", "card"), ("data-n", "3")]


def test_renders_without_escaping_by_default():
    assert _card().to_html() == (
        '<div class="card" data-n="3"><h2>Title & <more></h2>raw <b>bold</b><p>single</p></div>'
    )


def test_escape_setting_applies_to_text_and_values():
    spec = ElementSpec(tag="p", attributes=[("title", '"x"')], children=["a < b"])
    assert spec.to_html(RenderSettings(escape_text=True)) == '<p title="&quot;x&quot;">a &lt; b</p>'


def test_node_escape_override_is_inherited():
    spec = ElementSpec.model_validate(
        {"tag": "div", "escape": True, "children": [{"tag": "p", "children": ["<i>"]}, "&"]}
    )
    assert spec.to_html() == "<div><p>&lt;i&gt;</p>&amp;</div>"

    spec = ElementSpec.model_validate(
        {"tag": "div", "escape": False, "children": [{"tag": "p", "children": ["<i>"]}]}
    )
    assert spec.to_html(RenderSettings(escape_text=True)) == "<div><p><i></p></div>"


def test_tag_names_pre_order():
    assert _card().tag_names() == ["div", "h2", "p"]


def test_invalid_tag_is_validation_error():
    with pytest.raises(ValidationError):
        ElementSpec(tag="")
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "div", "children": [{"tag": "bad tag"}]})


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        ElementSpec.model_validate({"tag": "div", "attrs": {}})


def test_numbers_and_booleans_become_text():
    spec = ElementSpec.model_validate({"tag": "td", "attributes": [["colspan", 2]], "children": [1, True]})
    assert spec.to_html() == '<td colspan="2">1true</td>'


def test_page_document_doctype():
    page = PageDocument.model_validate({"settings": {"doctype": True}, "root": {"tag": "html"}})
    assert page.to_html() == "<!DOCTYPE html><html></html>"
    assert page.to_html(RenderSettings()) == "<html></html>"


def test_settings_alias():
    assert RenderSettings.model_validate({"escapeText": True}).escape_text is True
    assert RenderSettings.model_validate({"escape_text": True}).escape_text is True


def test_settings_encoding_must_exist():
    assert RenderSettings(encoding="latin-1").encoding == "latin-1"
    with pytest.raises(ValidationError):
        RenderSettings(encoding="nope")
