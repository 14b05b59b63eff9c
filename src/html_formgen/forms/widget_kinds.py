"""
Widget kinds and the selection algorithm.

Selection is a total mapping from a descriptor's shape to a WidgetKind,
evaluated in priority order (first match wins):

    1. allowed values + list      -> CHECKBOX_GROUP
    2. allowed values             -> SELECT_MENU
    3. NUMERIC type               -> NUMERIC_BOX
    4. BOOLEAN type               -> CHECKBOX
    5. STRING or unrecognized     -> TEXT_BOX

An allowed-value set always wins over the declared type.
"""

from enum import Enum
from typing import Dict, Optional
import logging

from html_formgen.forms.parameter_descriptor import ParameterDescriptor, ParameterType

logger = logging.getLogger(__name__)


class WidgetKind(Enum):
    """Form controls a parameter can be rendered as."""
    TEXT_BOX = "text_box"
    NUMERIC_BOX = "numeric_box"
    CHECKBOX = "checkbox"
    SELECT_MENU = "select_menu"
    CHECKBOX_GROUP = "checkbox_group"


# Free-form widgets by declared type; unrecognized types are looked up as STRING
TYPE_WIDGET_KINDS: Dict[ParameterType, WidgetKind] = {
    ParameterType.STRING: WidgetKind.TEXT_BOX,
    ParameterType.NUMERIC: WidgetKind.NUMERIC_BOX,
    ParameterType.BOOLEAN: WidgetKind.CHECKBOX,
}


def widget_kind_for_type(parameter_type: Optional[ParameterType]) -> WidgetKind:
    """Widget for a parameter without allowed values."""
    if parameter_type is None:
        return TYPE_WIDGET_KINDS[ParameterType.STRING]
    return TYPE_WIDGET_KINDS[parameter_type]


def select_widget_kind(descriptor: ParameterDescriptor) -> WidgetKind:
    """
    Choose the widget for a descriptor.

    Args:
        descriptor: The parameter definition

    Returns:
        The WidgetKind to render

    Examples:
        >>> select_widget_kind(ParameterDescriptor("limit", type="integer"))
        <WidgetKind.NUMERIC_BOX: 'numeric_box'>
        >>> select_widget_kind(ParameterDescriptor("format", allowed_values=("table", "list")))
        <WidgetKind.SELECT_MENU: 'select_menu'>
    """
    if descriptor.has_allowed_values:
        kind = WidgetKind.CHECKBOX_GROUP if descriptor.is_list else WidgetKind.SELECT_MENU
    else:
        parameter_type = descriptor.parameter_type
        if parameter_type is None:
            logger.debug(
                f"Unrecognized type {descriptor.type!r} for '{descriptor.name}', "
                f"falling back to {ParameterType.STRING.value}"
            )
        kind = widget_kind_for_type(parameter_type)

    logger.debug(f"Selected {kind.value} for parameter '{descriptor.name}'")
    return kind
