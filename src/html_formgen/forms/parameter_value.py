"""
Discriminated union types for parameter values.

Instead of overloading one loose value (False meaning "not provided", strings
and lists mixed freely), a parameter value is one of three explicit types:

    - Unset: no value was provided; resolution falls back to the default
    - ScalarValue: a single value, where the empty string is a real value
    - ListValue: an ordered sequence of values

Pattern:
    Instead of:
        if current_value is False:
            value = default
        elif isinstance(current_value, list):
            ...

    Use:
        value = resolve_value(descriptor, current_value)
        if isinstance(value, ListValue):
            # Type checker knows value.values is a tuple of strings

Value resolution lives here as well:
    - resolve_value(): current value or the descriptor default
    - resolve_display_value(): as above, list values flattened for text fields
    - selected_values(): the set of strings used for option/checkbox membership
"""

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union
import logging

from html_formgen.forms.parameter_descriptor import ParameterDescriptor
from html_formgen.forms.parameter_form_constants import CONSTANTS
from html_formgen.forms.parameter_type_utils import ParameterTypeUtils

logger = logging.getLogger(__name__)


class Unset:
    """Marker type for a value that was never provided."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


@dataclass(frozen=True)
class ScalarValue:
    """A single value in its form-field string form."""
    text: str


@dataclass(frozen=True)
class ListValue:
    """An ordered sequence of values in their form-field string form."""
    values: Tuple[str, ...]

    @classmethod
    def of(cls, items: Iterable[Any]) -> "ListValue":
        return cls(tuple(ParameterTypeUtils.stringify_scalar(item) for item in items))


# Union type for type hints
ParameterValue = Union[Unset, ScalarValue, ListValue]


def to_parameter_value(raw: Any) -> ParameterValue:
    """
    Convert a loose Python value into a ParameterValue.

    Args:
        raw: UNSET, None, an existing ParameterValue, a sequence or a scalar

    Returns:
        UNSET for UNSET/None, the value itself for ParameterValue instances,
        ListValue for lists/tuples/sets, ScalarValue for anything else

    Examples:
        >>> to_parameter_value(None)
        UNSET
        >>> to_parameter_value(["a", 2])
        ListValue(values=('a', '2'))
        >>> to_parameter_value("")
        ScalarValue(text='')
    """
    if raw is None or isinstance(raw, Unset):
        return UNSET
    if isinstance(raw, (ScalarValue, ListValue)):
        return raw
    if ParameterTypeUtils.is_sequence(raw):
        return ListValue.of(raw)
    return ScalarValue(ParameterTypeUtils.stringify_scalar(raw))


def resolve_value(descriptor: ParameterDescriptor, current_value: Any = UNSET) -> ParameterValue:
    """Current value when provided, otherwise the descriptor default."""
    value = to_parameter_value(current_value)
    if isinstance(value, Unset):
        return to_parameter_value(descriptor.default)
    return value


def resolve_display_value(descriptor: ParameterDescriptor, current_value: Any = UNSET) -> ParameterValue:
    """
    Resolve the value to show in a single form field.

    List parameters holding a list are flattened into one scalar by joining
    with the descriptor delimiter, which is what a free-text box displays.

    Args:
        descriptor: The parameter definition
        current_value: Override for the default, UNSET when not provided

    Returns:
        The resolved ParameterValue; never a ListValue for list parameters
    """
    value = resolve_value(descriptor, current_value)
    if descriptor.is_list and isinstance(value, ListValue):
        value = ScalarValue(descriptor.delimiter.join(value.values))
        logger.debug(f"Flattened list value for '{descriptor.name}' to {value.text!r}")
    return value


def display_text(value: ParameterValue, delimiter: str = CONSTANTS.DEFAULT_DELIMITER) -> str:
    """Flat string for a text field value attribute."""
    if isinstance(value, ScalarValue):
        return value.text
    if isinstance(value, ListValue):
        return delimiter.join(value.values)
    return CONSTANTS.EMPTY_STRING


def selected_values(descriptor: ParameterDescriptor, current_value: Any = UNSET) -> Tuple[str, ...]:
    """
    Resolve the selected set used by select menus and checkbox groups.

    Scalars become a one-element tuple; list values are kept as sequences and
    are never flattened here.
    """
    value = resolve_value(descriptor, current_value)
    if isinstance(value, ListValue):
        return value.values
    if isinstance(value, ScalarValue):
        return (value.text,)
    return ()


def is_truthy(value: ParameterValue) -> bool:
    """
    Checked state for a boolean checkbox.

    UNSET, the empty string and "0" are unchecked; an empty list is unchecked;
    anything else is checked.
    """
    if isinstance(value, ScalarValue):
        return ParameterTypeUtils.is_truthy_text(value.text)
    if isinstance(value, ListValue):
        return bool(value.values)
    return False
