"""
Core HTML utilities.

Element builders with no knowledge of parameters or widget selection.
"""

from .markup import element, raw_element, input_element, check, join

__all__ = [
    "element",
    "raw_element",
    "input_element",
    "check",
    "join",
]
