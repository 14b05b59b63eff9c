"""Tests for parameter types and widget selection."""

import pytest


@pytest.mark.parametrize("type_name, expected", [
    ("string", "STRING"),
    ("str", "STRING"),
    ("number", "NUMERIC"),
    ("integer", "NUMERIC"),
    ("float", "NUMERIC"),
    ("char", "NUMERIC"),
    ("Integer ", "NUMERIC"),
    ("boolean", "BOOLEAN"),
    ("bool", "BOOLEAN"),
])
def test_parameter_type_from_name(type_name, expected):
    """Test type names map onto the enumeration."""
    from html_formgen.forms import ParameterType

    assert ParameterType.from_name(type_name) is ParameterType[expected]


@pytest.mark.parametrize("type_name", ["wikitext", "", None, 3])
def test_parameter_type_from_unknown_name(type_name):
    """Test names outside the enumeration are reported as None."""
    from html_formgen.forms import ParameterType

    assert ParameterType.from_name(type_name) is None


@pytest.mark.parametrize("kwargs, expected", [
    ({"allowed_values": ("a",), "is_list": True}, "CHECKBOX_GROUP"),
    ({"allowed_values": ("a",), "is_list": True, "type": "boolean"}, "CHECKBOX_GROUP"),
    ({"allowed_values": ("a",)}, "SELECT_MENU"),
    ({"allowed_values": (1, 2), "type": "integer"}, "SELECT_MENU"),
    ({"allowed_values": ("a",), "type": "boolean"}, "SELECT_MENU"),
    ({"type": "integer"}, "NUMERIC_BOX"),
    ({"type": "number", "is_list": True}, "NUMERIC_BOX"),
    ({"type": "boolean"}, "CHECKBOX"),
    ({"type": "string"}, "TEXT_BOX"),
    ({"type": "string", "is_list": True}, "TEXT_BOX"),
    ({"type": "wikitext"}, "TEXT_BOX"),
    ({"allowed_values": ()}, "TEXT_BOX"),
    ({"allowed_values": (), "type": "integer"}, "NUMERIC_BOX"),
])
def test_select_widget_kind(make_descriptor, kwargs, expected):
    """Test widget selection priority, first match wins."""
    from html_formgen.forms import WidgetKind, select_widget_kind

    assert select_widget_kind(make_descriptor(**kwargs)) is WidgetKind[expected]


def test_every_type_has_a_widget():
    """Test the type to widget mapping is total."""
    from html_formgen.forms import ParameterType
    from html_formgen.forms.widget_kinds import TYPE_WIDGET_KINDS

    assert set(TYPE_WIDGET_KINDS) == set(ParameterType)


def test_descriptor_is_immutable(make_descriptor):
    """Test descriptors cannot be modified after construction."""
    import dataclasses

    descriptor = make_descriptor(allowed_values=["a", "b"], default=["a"])
    assert descriptor.allowed_values == ("a", "b")
    assert descriptor.default == ("a",)
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.name = "other"


@pytest.mark.parametrize("name", ["", None, 5])
def test_descriptor_requires_name(name):
    """Test descriptors without a usable name are rejected."""
    from html_formgen import InvalidDescriptorError, ParameterDescriptor

    with pytest.raises(InvalidDescriptorError):
        ParameterDescriptor(name)
