"""
HTML input for a single parameter.

ParameterInput pairs a ParameterDescriptor with an optional current value and
the name the field is submitted under, and renders the most appropriate form
control for it. It is the object to use when building a form from a list of
parameter definitions:

    >>> descriptor = ParameterDescriptor("limit", type="integer", default=50)
    >>> str(ParameterInput(descriptor).get_html())
    '<input type="text" name="limit" value="50" size="6">'

For one-off rendering, render() does the same in a single call.
"""

from typing import Any, Optional, Tuple
import logging

from markupsafe import Markup

from html_formgen.exceptions import InvalidDescriptorError
from html_formgen.forms.parameter_descriptor import ParameterDescriptor
from html_formgen.forms.parameter_form_constants import CONSTANTS
from html_formgen.forms.parameter_value import (
    UNSET, ParameterValue, resolve_display_value, selected_values, to_parameter_value,
)
from html_formgen.forms.widget_kinds import WidgetKind, select_widget_kind
from html_formgen.forms.widget_render_service import WidgetRenderService

logger = logging.getLogger(__name__)

_render_service = WidgetRenderService()


class ParameterInput:
    """
    Render request for one parameter.

    Attributes:
        descriptor: The parameter definition (read-only)
        current_value: Value shown in the widget; UNSET falls back to the default
        input_name: Submission key, the descriptor name unless overridden
    """

    def __init__(
        self,
        descriptor: ParameterDescriptor,
        current_value: Any = UNSET,
        input_name: Optional[str] = None,
    ):
        """
        Args:
            descriptor: The parameter to render an input for
            current_value: Override for the default; None and UNSET both mean "not provided"
            input_name: Override for the submission key

        Raises:
            InvalidDescriptorError: If descriptor is not a ParameterDescriptor
            ValueError: If input_name is given but empty
        """
        if not isinstance(descriptor, ParameterDescriptor):
            raise InvalidDescriptorError(
                CONSTANTS.INVALID_DESCRIPTOR_MSG.format(type(descriptor).__name__)
            )

        self._descriptor = descriptor
        self._current_value: ParameterValue = to_parameter_value(current_value)
        self._input_name = descriptor.name
        if input_name is not None:
            self.set_input_name(input_name)

    @property
    def descriptor(self) -> ParameterDescriptor:
        return self._descriptor

    @property
    def current_value(self) -> ParameterValue:
        return self._current_value

    @property
    def input_name(self) -> str:
        return self._input_name

    def set_current_value(self, current_value: Any) -> None:
        """Set the value to display; UNSET or None restores the default."""
        self._current_value = to_parameter_value(current_value)

    def set_input_name(self, name: str) -> None:
        """
        Set the name for the input; defaults to the name of the parameter.

        The name is used verbatim, including as the prefix of checkbox group keys.

        Raises:
            ValueError: If name is empty or not a string
        """
        if not isinstance(name, str) or not name:
            raise ValueError(CONSTANTS.EMPTY_INPUT_NAME_MSG.format(name))
        self._input_name = name

    @property
    def widget_kind(self) -> WidgetKind:
        return select_widget_kind(self._descriptor)

    def get_display_value(self) -> ParameterValue:
        """Value initially shown in a single-field widget."""
        return resolve_display_value(self._descriptor, self._current_value)

    def get_selected_values(self) -> Tuple[str, ...]:
        """Values marked as chosen in a select menu or checkbox group."""
        return selected_values(self._descriptor, self._current_value)

    def get_html(self) -> Markup:
        """
        Returns the HTML for the parameter input.

        Returns:
            A single form control, or a run of sibling checkboxes for list
            parameters with allowed values
        """
        return _render_service.render(self)

    __html__ = get_html

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(descriptor={self._descriptor!r}, "
            f"current_value={self._current_value!r}, input_name={self._input_name!r})"
        )


def render(
    descriptor: ParameterDescriptor,
    current_value: Any = UNSET,
    input_name: Optional[str] = None,
) -> Markup:
    """
    Render the form control for a parameter.

    Args:
        descriptor: The parameter definition
        current_value: Override for the default, UNSET when not provided
        input_name: Submission key, defaults to descriptor.name

    Returns:
        The HTML fragment as a Markup string

    Example:
        >>> desc = ParameterDescriptor("format", allowed_values=("table", "list"), default="list")
        >>> print(render(desc))
        <select name="format"><option value=""></option>
        <option value="table">table</option>
        <option value="list" selected>list</option></select>
    """
    return ParameterInput(descriptor, current_value, input_name).get_html()
