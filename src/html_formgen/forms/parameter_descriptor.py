"""
Immutable parameter descriptors.

A ParameterDescriptor is the read-only definition of one configurable value:
its declared type, whether it takes a list, the delimiter used to flatten
lists into text, an optional closed set of allowed values and a default.

Type names coming from looser upstream data are kept verbatim. Widget
selection maps them onto ParameterType through ParameterType.from_name(),
and names outside the enumeration fall back to STRING.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union
import logging

from html_formgen.exceptions import InvalidDescriptorError
from html_formgen.forms.parameter_form_constants import CONSTANTS

logger = logging.getLogger(__name__)


class ParameterType(Enum):
    """Parameter types that have a dedicated widget."""
    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"

    @classmethod
    def from_name(cls, type_name: Union["ParameterType", str, None]) -> Optional["ParameterType"]:
        """
        Map a declared type onto the enumeration.

        Args:
            type_name: A ParameterType member or a raw type name such as "integer"

        Returns:
            The matching ParameterType, or None for names outside the enumeration

        Example:
            >>> ParameterType.from_name("float")
            <ParameterType.NUMERIC: 'numeric'>
            >>> ParameterType.from_name("wikitext") is None
            True
        """
        if isinstance(type_name, ParameterType):
            return type_name
        if not isinstance(type_name, str):
            return None

        normalized = type_name.strip().lower()
        if normalized in CONSTANTS.NUMERIC_TYPE_NAMES:
            return cls.NUMERIC
        if normalized in CONSTANTS.BOOLEAN_TYPE_NAMES:
            return cls.BOOLEAN
        if normalized in CONSTANTS.STRING_TYPE_NAMES:
            return cls.STRING
        return None


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    Read-only definition of a single parameter.

    Attributes:
        name: Stable identifier, used as the default form field key
        type: ParameterType member or raw type name
        is_list: Whether the parameter accepts multiple values
        delimiter: Joins list values when they are shown as flat text
        allowed_values: Ordered closed set of permitted values, or None
        default: Value used when no current value is supplied
    """
    name: str
    type: Union[ParameterType, str] = ParameterType.STRING
    is_list: bool = False
    delimiter: str = CONSTANTS.DEFAULT_DELIMITER
    allowed_values: Optional[Tuple[Any, ...]] = None
    default: Any = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidDescriptorError(CONSTANTS.EMPTY_NAME_MSG.format(self.name))

        # Normalize to a tuple so descriptors stay hashable and immutable
        if self.allowed_values is not None:
            object.__setattr__(self, "allowed_values", tuple(self.allowed_values))

        # Lists given as defaults are frozen the same way
        if isinstance(self.default, list):
            object.__setattr__(self, "default", tuple(self.default))

    @property
    def parameter_type(self) -> Optional[ParameterType]:
        """Declared type as an enum member, None when the name is unrecognized."""
        return ParameterType.from_name(self.type)

    @property
    def has_allowed_values(self) -> bool:
        return bool(self.allowed_values)
