"""
html-formgen: HTML form controls for typed parameter definitions.

Renders the most appropriate input widget for a single parameter (text box,
numeric box, checkbox, select menu or checkbox group) and pre-populates it
from the current value or the parameter default.

Architecture:
- Core: HTML element primitives on top of htpy and markupsafe
- Protocols: Application configuration hooks
- Services: Enum-driven dispatch
- Forms: Descriptors, value resolution, widget selection and rendering

Key Features:
- Explicit parameter type enum with a documented text-box fallback
- Unset / scalar / list value types instead of sentinel values
- Composite checkbox-group keys (name[value]) for multi-valued parameters
- All attribute values and texts escaped
"""

__version__ = "0.1.0"

from .exceptions import FormGenError, InvalidDescriptorError
from .forms import (
    ParameterDescriptor,
    ParameterInput,
    ParameterType,
    UNSET,
    WidgetKind,
    descriptor_from_mapping,
    render,
)

__all__ = [
    "__version__",
    "FormGenError",
    "InvalidDescriptorError",
    "ParameterDescriptor",
    "ParameterInput",
    "ParameterType",
    "UNSET",
    "WidgetKind",
    "descriptor_from_mapping",
    "render",
]
