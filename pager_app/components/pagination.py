"""
Pagination Component
====================

Numbered page navigation
- "Showing X-Y of Z" summary
- Previous / Next buttons (disabled at the first / last page)
- Page number buttons with ellipses, at most 7 tokens

Each pagination() call creates its own PaginationState subclass, so several
controls on one page never share an active page.

Usage:
    >>> pagination(
    ...     total_results=ResultsState.total_results,
    ...     results_per_page=ResultsState.page_size,
    ...     label="Table navigation",
    ...     on_change=ResultsState.set_page,
    ... )
"""

import reflex as rx
from typing import Any, ClassVar, Dict, List, Optional, Union
from reflex.utils import console

from ..config import DEFAULT_RESULTS_PER_PAGE, InvalidPaginationProps, PaginationProps
from ..core.controller import (
    GoToNext,
    GoToPrevious,
    Initialize,
    PagingEvent,
    PagingState,
    Resize,
    SelectPage,
    transition,
)
from ..core.window import showing_range, to_display, total_pages_for
from ..styles.theme import ICONS, PAGINATION
from .button import button


# ============================================
# Building blocks
# ============================================

def navigation_button(direction: str, on_click, disabled: Union[bool, rx.Var]) -> rx.Component:
    """Icon-only previous/next button"""
    return button(
        size="small",
        layout="link",
        icon=ICONS[direction],
        aria_label="Previous" if direction == "prev" else "Next",
        on_click=on_click,
        disabled=disabled,
    )


def page_button(page, is_active: Union[bool, rx.Var], on_click) -> rx.Component:
    """Page number button, highlighted when active"""
    if isinstance(is_active, rx.Var):
        return rx.cond(
            is_active,
            button(page, size="pagination", layout="primary", on_click=on_click),
            button(page, size="pagination", layout="link", on_click=on_click),
        )
    return button(
        page,
        size="pagination",
        layout="primary" if is_active else "link",
        on_click=on_click,
    )


def empty_page_button() -> rx.Component:
    """Inert ellipsis placeholder"""
    return rx.el.span("...", class_name=PAGINATION["ellipsis"])


# ============================================
# State
# ============================================

class PaginationState(rx.ComponentState):
    """Active page of one pagination control"""

    active_page: int = 1
    total_results: int = 0
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE
    pages: List[Dict[str, Any]] = []

    # Caller's handler, bound per instance in get_component
    on_change_handler: ClassVar[Optional[rx.EventHandler]] = None

    @rx.var
    def total_pages(self) -> int:
        return total_pages_for(self.total_results, self.results_per_page)

    @rx.var
    def can_go_previous(self) -> bool:
        return self.active_page > 1

    @rx.var
    def can_go_next(self) -> bool:
        return self.active_page < self.total_pages

    @rx.var
    def showing_first(self) -> int:
        return showing_range(self.active_page, self.results_per_page, self.total_results)[0]

    @rx.var
    def showing_last(self) -> int:
        return showing_range(self.active_page, self.results_per_page, self.total_results)[1]

    def _apply(self, event: PagingEvent):
        """Run one transition and hand the new page to the caller."""
        state = PagingState(
            active_page=self.active_page,
            total_pages=total_pages_for(self.total_results, self.results_per_page),
        )
        result = transition(state, event)

        self.active_page = result.state.active_page
        self.pages = to_display(result.window, self.active_page)

        if not result.changed:
            return None

        console.debug(f"{self.__class__.__name__} active page -> {result.notification}")
        handler = self.__class__.on_change_handler
        if handler is not None:
            return handler(result.notification)
        return None

    def _set_totals(self, total_results, results_per_page) -> None:
        """Validate and store the caller's totals."""
        total_results = int(total_results)
        results_per_page = int(results_per_page)
        if results_per_page <= 0:
            raise InvalidPaginationProps(f"results_per_page must be positive, got {results_per_page}")
        if total_results < 0:
            console.warn(f"Negative total_results {total_results} clamped to 0")
            total_results = 0
        self.total_results = total_results
        self.results_per_page = results_per_page

    @rx.event
    def initialize(self, total_results: int, results_per_page: int, active_page: int = 0):
        """Mount: set totals and the starting page (0 means not supplied), then notify."""
        self._set_totals(total_results, results_per_page)
        return self._apply(Initialize(int(active_page) or None))

    @rx.event
    def go_to_previous(self):
        return self._apply(GoToPrevious())

    @rx.event
    def go_to_next(self):
        return self._apply(GoToNext())

    @rx.event
    def select_page(self, page: int):
        return self._apply(SelectPage(int(page)))

    @rx.event
    def resize(self, total_results: int, results_per_page: int):
        """Push new totals from the caller; clamps the active page."""
        self._set_totals(total_results, results_per_page)
        return self._apply(Resize(self.total_results, self.results_per_page))

    @classmethod
    def get_component(
        cls,
        total_results: Union[int, rx.Var],
        label: str,
        on_change: Optional[rx.EventHandler] = None,
        results_per_page: Union[int, rx.Var] = DEFAULT_RESULTS_PER_PAGE,
        active_page: Optional[Union[int, rx.Var]] = None,
        **props
    ) -> rx.Component:
        """
        Build the pagination control.

        Args:
            total_results: Number of results (int or state Var)
            label: Accessible name of the navigation region
            on_change: Event handler receiving the new active page
            results_per_page: Page size (int or state Var)
            active_page: Initial page, 1 when omitted
            **props: Passed to the wrapping div

        Returns:
            rx.Component: Pagination component
        """
        if not isinstance(total_results, rx.Var) and not isinstance(results_per_page, rx.Var):
            PaginationProps(
                total_results=total_results,
                label=label,
                results_per_page=results_per_page,
                active_page=active_page if not isinstance(active_page, rx.Var) else None,
            ).validate()

        cls.on_change_handler = on_change

        return rx.el.div(
            rx.el.span(
                f"Showing {cls.showing_first}-{cls.showing_last} of {cls.total_results}",
                class_name=PAGINATION["summary"],
            ),
            rx.el.div(
                rx.el.nav(
                    rx.el.ul(
                        rx.el.li(
                            navigation_button("prev", cls.go_to_previous, ~cls.can_go_previous),
                        ),
                        rx.foreach(
                            cls.pages,
                            lambda item: rx.el.li(
                                rx.cond(
                                    item["kind"] == "ellipsis",
                                    empty_page_button(),
                                    page_button(
                                        item["page"],
                                        item["active"],
                                        cls.select_page(item["page"]),
                                    ),
                                ),
                                key=item["key"],
                            ),
                        ),
                        rx.el.li(
                            navigation_button("next", cls.go_to_next, ~cls.can_go_next),
                        ),
                        class_name=PAGINATION["list"],
                    ),
                    custom_attrs={"aria-label": label},
                ),
                class_name=PAGINATION["nav_wrapper"],
            ),
            on_mount=cls.initialize(
                total_results,
                results_per_page,
                active_page if active_page is not None else 0,
            ),
            class_name=PAGINATION["base"],
            **props
        )


pagination = PaginationState.create
