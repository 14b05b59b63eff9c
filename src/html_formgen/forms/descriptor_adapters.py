"""
Adapters from legacy parameter definitions to ParameterDescriptor.

Older callers describe parameters as plain mappings using the legacy keys
(``islist``, ``values``) or their snake_case spellings. ParameterInput only
accepts ParameterDescriptor, so conversion happens here, at the call site:

    >>> descriptor_from_mapping({"name": "format", "values": ["table", "list"]})
    ParameterDescriptor(name='format', type=<ParameterType.STRING: 'string'>, ...)
"""

from typing import Any, Iterable, List, Mapping
import logging

from html_formgen.exceptions import InvalidDescriptorError
from html_formgen.forms.parameter_descriptor import ParameterDescriptor, ParameterType
from html_formgen.forms.parameter_form_constants import CONSTANTS

logger = logging.getLogger(__name__)


def _first_present(definition: Mapping[str, Any], keys: Iterable[str], default: Any = None) -> Any:
    for key in keys:
        if key in definition:
            return definition[key]
    return default


def descriptor_from_mapping(definition: Mapping[str, Any]) -> ParameterDescriptor:
    """
    Build a descriptor from a legacy definition mapping.

    Recognized keys: name, type, default, delimiter, is_list/islist,
    allowed_values/values. Unknown keys are ignored.

    Args:
        definition: The legacy definition

    Returns:
        The equivalent ParameterDescriptor

    Raises:
        InvalidDescriptorError: If definition is not a mapping or has no usable name
    """
    if not isinstance(definition, Mapping):
        raise InvalidDescriptorError(CONSTANTS.MAPPING_REQUIRED_MSG.format(type(definition).__name__))

    allowed_values = _first_present(definition, CONSTANTS.LEGACY_ALLOWED_VALUES_KEYS)
    if allowed_values is not None and not isinstance(allowed_values, (list, tuple)):
        logger.debug(f"Ignoring non-sequence allowed values for {definition.get('name')!r}")
        allowed_values = None

    return ParameterDescriptor(
        name=definition.get("name"),
        type=definition.get("type") or ParameterType.STRING,
        is_list=bool(_first_present(definition, CONSTANTS.LEGACY_LIST_KEYS, False)),
        delimiter=definition.get("delimiter") or CONSTANTS.DEFAULT_DELIMITER,
        allowed_values=allowed_values,
        default=definition.get("default"),
    )


def descriptors_from_mappings(definitions: Iterable[Mapping[str, Any]]) -> List[ParameterDescriptor]:
    """Convert a list of legacy definitions, preserving order."""
    return [descriptor_from_mapping(definition) for definition in definitions]
