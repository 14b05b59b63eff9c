"""
Parameter widget rendering.

ParameterInput and supporting infrastructure for rendering an HTML form
control from a typed parameter definition.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parameter_input import ParameterInput, render
    from .parameter_descriptor import ParameterDescriptor, ParameterType
    from .parameter_value import UNSET, Unset, ScalarValue, ListValue, ParameterValue
    from .widget_kinds import WidgetKind, select_widget_kind
    from .widget_render_service import WidgetRenderService
    from .descriptor_adapters import descriptor_from_mapping, descriptors_from_mappings

_EXPORTS = {
    "ParameterInput": ("html_formgen.forms.parameter_input", "ParameterInput"),
    "render": ("html_formgen.forms.parameter_input", "render"),
    "ParameterDescriptor": ("html_formgen.forms.parameter_descriptor", "ParameterDescriptor"),
    "ParameterType": ("html_formgen.forms.parameter_descriptor", "ParameterType"),
    "UNSET": ("html_formgen.forms.parameter_value", "UNSET"),
    "Unset": ("html_formgen.forms.parameter_value", "Unset"),
    "ScalarValue": ("html_formgen.forms.parameter_value", "ScalarValue"),
    "ListValue": ("html_formgen.forms.parameter_value", "ListValue"),
    "ParameterValue": ("html_formgen.forms.parameter_value", "ParameterValue"),
    "to_parameter_value": ("html_formgen.forms.parameter_value", "to_parameter_value"),
    "resolve_value": ("html_formgen.forms.parameter_value", "resolve_value"),
    "resolve_display_value": ("html_formgen.forms.parameter_value", "resolve_display_value"),
    "selected_values": ("html_formgen.forms.parameter_value", "selected_values"),
    "ParameterTypeUtils": ("html_formgen.forms.parameter_type_utils", "ParameterTypeUtils"),
    "WidgetKind": ("html_formgen.forms.widget_kinds", "WidgetKind"),
    "select_widget_kind": ("html_formgen.forms.widget_kinds", "select_widget_kind"),
    "WidgetRenderService": ("html_formgen.forms.widget_render_service", "WidgetRenderService"),
    "descriptor_from_mapping": ("html_formgen.forms.descriptor_adapters", "descriptor_from_mapping"),
    "descriptors_from_mappings": ("html_formgen.forms.descriptor_adapters", "descriptors_from_mappings"),
    "WidgetLayoutConfig": ("html_formgen.forms.layout_constants", "WidgetLayoutConfig"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
