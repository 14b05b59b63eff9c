"""
Layout constants for rendered parameter widgets.

This module centralizes width hints and inline style hints so every rendered
widget kind sizes itself consistently.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WidgetLayoutConfig:
    """Configuration for widget width hints and inline layout."""

    # Text box widths (HTML size attribute, in characters)
    numeric_input_size: int = 6
    text_input_size: int = 32

    # Each checkbox of a group is wrapped so the box never breaks from its label
    checkbox_group_item_style: str = "white-space: nowrap; padding-right: 5px;"


# Default compact configuration
COMPACT_LAYOUT = WidgetLayoutConfig()

# Wider boxes for forms that have the horizontal room
WIDE_LAYOUT = WidgetLayoutConfig(
    numeric_input_size=10,
    text_input_size=48,
    checkbox_group_item_style="white-space: nowrap; padding-right: 10px;",
)

# Current active configuration
CURRENT_LAYOUT = COMPACT_LAYOUT
