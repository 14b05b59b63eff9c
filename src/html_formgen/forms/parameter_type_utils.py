"""
Parameter type utilities for widget rendering.

This module provides centralized conversions between Python values and the
strings HTML form fields carry, so value resolution and markup emission agree
on a single representation.
"""

from typing import Any

from html_formgen.forms.parameter_form_constants import CONSTANTS


class ParameterTypeUtils:
    """
    Utility class for value stringification and truthiness.

    All methods are static; the class only groups them.
    """

    @staticmethod
    def stringify_scalar(value: Any) -> str:
        """
        Convert a scalar to the text a form field carries.

        None and False become the empty string and True becomes "1", so that
        booleans survive a round trip through a checkbox.

        Args:
            value: The scalar to convert

        Returns:
            The string form of the value

        Example:
            >>> ParameterTypeUtils.stringify_scalar(True)
            '1'
            >>> ParameterTypeUtils.stringify_scalar(None)
            ''
            >>> ParameterTypeUtils.stringify_scalar(2.5)
            '2.5'
        """
        if value is None or value is False:
            return CONSTANTS.EMPTY_STRING
        if value is True:
            return CONSTANTS.TRUE_STRING
        return str(value)

    @staticmethod
    def is_sequence(value: Any) -> bool:
        """
        Check whether a raw value should be read as a list of values.

        Strings and bytes are scalars even though they are iterable.
        """
        return isinstance(value, (list, tuple, set, frozenset))

    @staticmethod
    def is_truthy_text(text: str) -> bool:
        """Check whether scalar text marks a checkbox as checked."""
        return text not in CONSTANTS.FALSY_STRINGS

    @staticmethod
    def composite_key(input_name: str, value: str) -> str:
        """
        Build the submission key for one checkbox of a group.

        Example:
            >>> ParameterTypeUtils.composite_key("format", "table")
            'format[table]'
        """
        return CONSTANTS.COMPOSITE_KEY_TEMPLATE.format(input_name, value)
