"""
Markup emission for each widget kind.

WidgetRenderService is an EnumDispatchService keyed by WidgetKind: the
strategy is chosen by select_widget_kind() and each handler turns a
ParameterInput into an HTML fragment through the primitives in
html_formgen.core.markup. Handlers only read the request.
"""

from markupsafe import Markup
import logging

from html_formgen.core import markup
from html_formgen.forms.parameter_type_utils import ParameterTypeUtils
from html_formgen.forms.parameter_value import (
    display_text, is_truthy, resolve_display_value, selected_values,
)
from html_formgen.forms.widget_kinds import WidgetKind, select_widget_kind
from html_formgen.protocols.form_config import get_form_config
from html_formgen.services.enum_dispatch_service import EnumDispatchService

logger = logging.getLogger(__name__)


class WidgetRenderService(EnumDispatchService[WidgetKind]):
    """Render a ParameterInput as the widget its descriptor calls for."""

    strategy_enum = WidgetKind

    def _build_handlers(self):
        return {
            WidgetKind.TEXT_BOX: self._render_text_box,
            WidgetKind.NUMERIC_BOX: self._render_numeric_box,
            WidgetKind.CHECKBOX: self._render_checkbox,
            WidgetKind.SELECT_MENU: self._render_select_menu,
            WidgetKind.CHECKBOX_GROUP: self._render_checkbox_group,
        }

    def _determine_strategy(self, request) -> WidgetKind:
        return select_widget_kind(request.descriptor)

    def render(self, request) -> Markup:
        """Render the widget for a ParameterInput."""
        return self.dispatch(request)

    # ==================== SINGLE FIELD WIDGETS ====================

    def _flat_value(self, request) -> str:
        value = resolve_display_value(request.descriptor, request.current_value)
        return display_text(value, request.descriptor.delimiter)

    def _render_text_box(self, request) -> Markup:
        size = get_form_config().layout.text_input_size
        return markup.input_element(request.input_name, self._flat_value(request), attrs={"size": size})

    def _render_numeric_box(self, request) -> Markup:
        size = get_form_config().layout.numeric_input_size
        return markup.input_element(request.input_name, self._flat_value(request), attrs={"size": size})

    def _render_checkbox(self, request) -> Markup:
        value = resolve_display_value(request.descriptor, request.current_value)
        return markup.check(
            request.input_name,
            is_truthy(value),
            attrs={"value": get_form_config().checkbox_value},
        )

    # ==================== SELECTION WIDGETS ====================

    def _render_select_menu(self, request) -> Markup:
        config = get_form_config()
        current = set(selected_values(request.descriptor, request.current_value))

        # Leading empty option stands for "no selection"
        options = [markup.element("option", {"value": ""})]
        for allowed in request.descriptor.allowed_values:
            text = ParameterTypeUtils.stringify_scalar(allowed)
            options.append(markup.element("option", {"value": text, "selected": text in current}, text))

        logger.debug(
            f"Rendering select '{request.input_name}' with {len(options) - 1} options, "
            f"selected={sorted(current)}"
        )
        return markup.raw_element(
            "select",
            {"name": request.input_name},
            markup.join(options, config.fragment_separator),
        )

    def _render_checkbox_group(self, request) -> Markup:
        config = get_form_config()
        current = set(selected_values(request.descriptor, request.current_value))

        boxes = []
        for allowed in request.descriptor.allowed_values:
            text = ParameterTypeUtils.stringify_scalar(allowed)
            box = markup.check(
                ParameterTypeUtils.composite_key(request.input_name, text),
                text in current,
                attrs={"value": config.checkbox_value},
            )
            boxes.append(markup.raw_element(
                "span",
                {"style": config.layout.checkbox_group_item_style},
                box + markup.element("code", text=text),
            ))

        logger.debug(f"Rendering {len(boxes)} grouped checkboxes for '{request.input_name}'")
        return markup.join(boxes, config.fragment_separator)
