"""
Parameter form constants for eliminating magic strings throughout the widget renderers.

This module centralizes all hardcoded strings used by value resolution, widget
selection and markup emission.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class ParameterFormConstants:
    """
    Centralized constants for parameter widget rendering.

    Categories:
    - Value formatting
    - Type name aliases
    - HTML input types and naming patterns
    - Error message templates
    """

    # Value formatting
    EMPTY_STRING: str = ""
    TRUE_STRING: str = "1"
    DEFAULT_DELIMITER: str = ","

    # Scalar texts that render an unchecked checkbox
    FALSY_STRINGS: FrozenSet[str] = frozenset({"", "0"})

    # Type name aliases accepted from loose upstream definitions
    STRING_TYPE_NAMES: FrozenSet[str] = frozenset({"string", "str"})
    NUMERIC_TYPE_NAMES: FrozenSet[str] = frozenset({
        "numeric", "number", "integer", "float", "char"
    })
    BOOLEAN_TYPE_NAMES: FrozenSet[str] = frozenset({"boolean", "bool"})

    # HTML input types
    INPUT_TYPE_TEXT: str = "text"
    INPUT_TYPE_CHECKBOX: str = "checkbox"

    # Checkbox group composite key: inputName[value]
    COMPOSITE_KEY_TEMPLATE: str = "{}[{}]"

    # Legacy definition keys
    LEGACY_LIST_KEYS: tuple = ("is_list", "islist")
    LEGACY_ALLOWED_VALUES_KEYS: tuple = ("allowed_values", "values")

    # Error and validation messages
    INVALID_DESCRIPTOR_MSG: str = (
        "ParameterInput requires a ParameterDescriptor, got {}. "
        "Convert legacy definitions with descriptor_from_mapping() first."
    )
    EMPTY_NAME_MSG: str = "Parameter name must be a non-empty string, got {!r}"
    EMPTY_INPUT_NAME_MSG: str = "Input name must be a non-empty string, got {!r}"
    MAPPING_REQUIRED_MSG: str = "Parameter definition must be a mapping, got {}"


# Create a singleton instance for easy access throughout the codebase
CONSTANTS = ParameterFormConstants()
