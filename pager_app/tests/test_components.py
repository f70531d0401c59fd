"""
Smoke tests for the Reflex components

Only checks that the component trees build; rendering and event wiring run
in the browser.
"""

import pytest
import reflex as rx

from pager_app.components.button import button
from pager_app.components.pagination import (
    empty_page_button,
    navigation_button,
    page_button,
    pagination,
)
from pager_app.config import InvalidPaginationProps
from pager_app.styles.theme import BUTTON_LAYOUTS, BUTTON_SIZES, button_class


class TestTheme:

    def test_button_class_combines_size_and_layout(self):
        classes = button_class("pagination", "primary")

        assert BUTTON_SIZES["pagination"] in classes
        assert BUTTON_LAYOUTS["primary"]["base"] in classes
        assert BUTTON_LAYOUTS["primary"]["active"] in classes

    def test_disabled_button_class(self):
        classes = button_class("small", "link", disabled=True)

        assert BUTTON_LAYOUTS["link"]["disabled"] in classes
        assert BUTTON_LAYOUTS["link"]["active"] not in classes

    def test_unknown_variants_fall_back(self):
        assert button_class("huge", "fancy") == button_class("regular", "primary")


class TestComponents:

    def test_button(self):
        assert isinstance(button("Save"), rx.Component)

    def test_icon_button(self):
        component = button(icon="chevron-left", aria_label="Previous", disabled=True)

        assert isinstance(component, rx.Component)

    def test_building_blocks(self):
        assert isinstance(navigation_button("prev", None, True), rx.Component)
        assert isinstance(page_button(3, True, None), rx.Component)
        assert isinstance(empty_page_button(), rx.Component)

    def test_pagination(self):
        component = pagination(total_results=120, label="Table navigation")

        assert isinstance(component, rx.Component)

    def test_pagination_rejects_bad_page_size(self):
        with pytest.raises(InvalidPaginationProps):
            pagination(total_results=120, results_per_page=0, label="Table navigation")
