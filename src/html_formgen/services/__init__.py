"""
Service layer for widget rendering.

Reusable dispatch infrastructure shared by the form renderers.
"""

from .enum_dispatch_service import EnumDispatchService

__all__ = [
    "EnumDispatchService",
]
