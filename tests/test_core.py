"""Tests for HTML element primitives."""

import pytest


def test_input_element():
    """Test input elements carry type, name, value and extra attributes."""
    from html_formgen.core import input_element

    html = input_element("limit", "42", attrs={"size": 6})
    assert html.startswith("<input")
    for fragment in ('type="text"', 'name="limit"', 'value="42"', 'size="6"'):
        assert fragment in html


def test_check():
    """Test checkboxes only carry the checked attribute when checked."""
    from html_formgen.core import check

    assert "checked" in check("flag", True)
    assert "checked" not in check("flag", False)
    assert 'type="checkbox"' in check("flag")


def test_element_escapes_text_and_attributes():
    """Test element() escapes both attribute values and text."""
    from html_formgen.core import element

    html = element("option", {"value": "<b>"}, "<b>")
    assert "<b>" not in html
    assert html.count("&lt;b&gt;") == 2


def test_raw_element_keeps_content():
    """Test raw_element() inserts trusted markup unchanged."""
    from html_formgen.core import raw_element

    html = raw_element("span", {"style": "x"}, "<code>a</code>")
    assert html == '<span style="x"><code>a</code></span>'


def test_join_keeps_markup():
    """Test joined fragments are not escaped again."""
    from markupsafe import Markup
    from html_formgen.core import element, join

    html = join([element("code", text="a"), element("code", text="b")], "\n")
    assert isinstance(html, Markup)
    assert html == "<code>a</code>\n<code>b</code>"


def test_unknown_element():
    """Test unknown tag names fail loud."""
    from html_formgen.core import element

    with pytest.raises(ValueError):
        element("not_a_tag")
