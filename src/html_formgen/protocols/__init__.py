"""
Application hooks.

Process-wide configuration that applications set once at startup.
"""

from .form_config import FormGenConfig, set_form_config, get_form_config, reset_form_config

__all__ = [
    "FormGenConfig",
    "set_form_config",
    "get_form_config",
    "reset_form_config",
]
