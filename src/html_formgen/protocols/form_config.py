"""Base configuration class for form generation.

Provides hooks for applications to customize widget rendering behavior.
"""

from typing import Optional
from dataclasses import dataclass, field

from html_formgen.forms.layout_constants import CURRENT_LAYOUT, WidgetLayoutConfig


@dataclass
class FormGenConfig:
    """Base configuration for widget rendering behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        layout: Width and inline style hints for rendered widgets
        checkbox_value: Value submitted by a checked checkbox
        fragment_separator: Text placed between sibling elements (options, grouped boxes)
    """

    layout: WidgetLayoutConfig = field(default_factory=lambda: CURRENT_LAYOUT)
    checkbox_value: str = "1"
    fragment_separator: str = "\n"


# Global config instance (set by application)
_form_config: Optional[FormGenConfig] = None


def set_form_config(config: FormGenConfig) -> None:
    """Set the global form generation configuration.

    Args:
        config: FormGenConfig instance
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormGenConfig:
    """Get the current form generation configuration.

    Returns:
        Current FormGenConfig or default if not set
    """
    if _form_config is None:
        return FormGenConfig()
    return _form_config


def reset_form_config() -> None:
    """Drop any application config so the defaults apply again."""
    global _form_config
    _form_config = None
