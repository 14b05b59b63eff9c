"""Tests for enum dispatch services."""

from enum import Enum

import pytest


class Shape(Enum):
    SQUARE = "square"
    CIRCLE = "circle"


def test_widget_render_service_covers_every_kind():
    """Test every widget kind has a registered handler."""
    from html_formgen.forms import WidgetKind, WidgetRenderService

    service = WidgetRenderService()
    assert set(service.get_registered_strategies()) == set(WidgetKind)
    assert all(service.has_strategy(kind) for kind in WidgetKind)


def test_dispatch_forwards_context_and_kwargs():
    """Test handlers receive the context and keyword arguments."""
    from html_formgen.services import EnumDispatchService

    class ShapeService(EnumDispatchService[Shape]):
        def _build_handlers(self):
            return {Shape.SQUARE: lambda ctx, suffix="": f"square:{ctx}{suffix}"}

        def _determine_strategy(self, ctx, **kwargs):
            return Shape.SQUARE

    assert ShapeService().dispatch("box") == "square:box"
    assert ShapeService().dispatch("box", suffix="!") == "square:box!"


def test_dispatch_unregistered_strategy():
    """Test unregistered strategies fail loud."""
    from html_formgen.services import EnumDispatchService

    class ShapeService(EnumDispatchService[Shape]):
        def _build_handlers(self):
            return {Shape.SQUARE: lambda ctx: ctx}

        def _determine_strategy(self, ctx):
            return Shape.CIRCLE

    with pytest.raises(KeyError):
        ShapeService().dispatch("box")


def test_strategy_enum_requires_total_table():
    """Test a declared strategy enum must be fully covered."""
    from html_formgen.services import EnumDispatchService

    class PartialService(EnumDispatchService[Shape]):
        strategy_enum = Shape

        def _build_handlers(self):
            return {Shape.SQUARE: lambda ctx: ctx}

        def _determine_strategy(self, ctx):
            return Shape.SQUARE

    with pytest.raises(ValueError, match="CIRCLE"):
        PartialService()


def test_empty_handler_registry():
    """Test registering no handlers is rejected."""
    from html_formgen.services import EnumDispatchService

    class EmptyService(EnumDispatchService[Shape]):
        def _build_handlers(self):
            return {}

        def _determine_strategy(self, ctx):
            return Shape.SQUARE

    with pytest.raises(ValueError):
        EmptyService()
