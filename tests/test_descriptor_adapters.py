"""Tests for legacy definition adapters."""

import pytest


def test_legacy_keys():
    """Test legacy islist/values keys map onto the descriptor."""
    from html_formgen import descriptor_from_mapping
    from html_formgen.forms import WidgetKind, select_widget_kind

    descriptor = descriptor_from_mapping({
        "name": "format",
        "type": "string",
        "islist": True,
        "values": ["table", "list"],
        "default": ["table"],
        "message": "ignored",
    })
    assert descriptor.name == "format"
    assert descriptor.is_list is True
    assert descriptor.allowed_values == ("table", "list")
    assert descriptor.default == ("table",)
    assert select_widget_kind(descriptor) is WidgetKind.CHECKBOX_GROUP


def test_snake_case_keys_and_defaults():
    """Test snake_case keys and fallbacks for missing keys."""
    from html_formgen import ParameterType, descriptor_from_mapping

    descriptor = descriptor_from_mapping({"name": "limit", "type": "integer", "is_list": False})
    assert descriptor.type == "integer"
    assert descriptor.parameter_type is ParameterType.NUMERIC
    assert descriptor.delimiter == ","
    assert descriptor.allowed_values is None

    bare = descriptor_from_mapping({"name": "title"})
    assert bare.type is ParameterType.STRING
    assert bare.default is None


def test_non_sequence_values_are_ignored():
    """Test allowed values that are not a sequence are dropped."""
    from html_formgen import descriptor_from_mapping

    assert descriptor_from_mapping({"name": "x", "values": "abc"}).allowed_values is None


@pytest.mark.parametrize("definition", [{}, {"name": ""}, {"type": "string"}, ["name"], None])
def test_unusable_definitions(definition):
    """Test definitions without a usable name are rejected."""
    from html_formgen import InvalidDescriptorError, descriptor_from_mapping

    with pytest.raises(InvalidDescriptorError):
        descriptor_from_mapping(definition)


def test_descriptors_from_mappings_renders():
    """Test converted definitions render at the call site."""
    from html_formgen import ParameterInput
    from html_formgen.forms import descriptors_from_mappings

    descriptors = descriptors_from_mappings([
        {"name": "limit", "type": "integer", "default": 20},
        {"name": "headers", "type": "boolean", "default": True},
    ])
    html = [ParameterInput(descriptor, input_name=f"p[{descriptor.name}]").get_html() for descriptor in descriptors]
    assert 'name="p[limit]"' in html[0]
    assert 'value="20"' in html[0]
    assert "checked" in html[1]
