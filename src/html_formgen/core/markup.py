"""
HTML element primitives.

Thin builders over htpy that return markupsafe.Markup strings. Every
attribute value and every text child is escaped by htpy; content passed to
raw_element() is trusted and inserted as-is.

Boolean attributes follow htpy: True renders the bare attribute name, False
and None omit it.
"""

from typing import Any, Iterable, Mapping, Optional

import htpy
from markupsafe import Markup

from html_formgen.forms.parameter_form_constants import CONSTANTS

AttributeValue = Any  # str, bool or None

# Container elements the widget renderers emit
ELEMENT_TAGS = frozenset({"code", "div", "label", "option", "select", "span"})


def _build(tag: str, attrs: Optional[Mapping[str, AttributeValue]]):
    """Create an htpy element for a tag name."""
    if tag not in ELEMENT_TAGS:
        raise ValueError(f"Unknown HTML element: {tag!r}. Supported: {sorted(ELEMENT_TAGS)}")
    return getattr(htpy, tag)(**{key: _attribute_text(val) for key, val in (attrs or {}).items()})


def element(tag: str, attrs: Optional[Mapping[str, AttributeValue]] = None, text: str = "") -> Markup:
    """Element whose text content is escaped."""
    node = _build(tag, attrs)
    return Markup(str(node[text] if text else node))


def raw_element(tag: str, attrs: Optional[Mapping[str, AttributeValue]] = None, html: str = "") -> Markup:
    """Element whose content is trusted markup."""
    node = _build(tag, attrs)
    return Markup(str(node[Markup(html)] if html else node))


def input_element(
    name: str,
    value: str = "",
    type: str = CONSTANTS.INPUT_TYPE_TEXT,
    attrs: Optional[Mapping[str, AttributeValue]] = None,
) -> Markup:
    """
    Self-closing input element.

    Args:
        name: Submission key
        value: Initial value
        type: HTML input type
        attrs: Extra attributes such as size hints

    Returns:
        Rendered <input> markup

    Example:
        >>> str(input_element("limit", "42", attrs={"size": 6}))
        '<input type="text" name="limit" value="42" size="6">'
    """
    attributes = {"type": type, "name": name, "value": value}
    attributes.update({key: _attribute_text(val) for key, val in (attrs or {}).items()})
    return Markup(str(htpy.input(**attributes)))


def check(
    name: str,
    checked: bool = False,
    attrs: Optional[Mapping[str, AttributeValue]] = None,
) -> Markup:
    """Checkbox input, checked when ``checked`` is true."""
    attributes = {"type": CONSTANTS.INPUT_TYPE_CHECKBOX, "name": name}
    attributes.update({key: _attribute_text(val) for key, val in (attrs or {}).items()})
    attributes["checked"] = bool(checked)
    return Markup(str(htpy.input(**attributes)))


def join(fragments: Iterable[Markup], separator: str = "\n") -> Markup:
    """Concatenate already rendered fragments."""
    return Markup(separator.join(str(fragment) for fragment in fragments))


def _attribute_text(value: AttributeValue) -> AttributeValue:
    # htpy only understands str and bool attribute values
    if isinstance(value, (bool, str)) or value is None:
        return value
    return str(value)
