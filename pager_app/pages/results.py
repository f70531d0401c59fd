"""
Results page
Demo list paged by the pagination component
"""

import reflex as rx

from ..components.pagination import pagination
from ..config import DEMO_LABEL, RESULTS_PER_PAGE_OPTIONS
from ..states.results_state import ResultsState


def results_list() -> rx.Component:
    """Rows of the active page"""
    return rx.vstack(
        rx.foreach(
            ResultsState.visible_results,
            lambda row: rx.text(row, size="2"),
        ),
        spacing="1",
        width="100%",
        min_height="240px",
    )


def results_page() -> rx.Component:
    pager = pagination(
        total_results=ResultsState.total_results,
        results_per_page=ResultsState.page_size,
        label=DEMO_LABEL,
        on_change=ResultsState.set_page,
    )

    return rx.container(
        rx.vstack(
            rx.hstack(
                rx.heading("Results", size="5", weight="bold"),
                rx.spacer(),
                rx.text("Per page", size="2", color="gray"),
                rx.select(
                    [str(n) for n in RESULTS_PER_PAGE_OPTIONS],
                    value=ResultsState.page_size.to_string(),
                    on_change=lambda value: [
                        ResultsState.set_page_size(value),
                        pager.State.resize(ResultsState.total_results, value),
                    ],
                    size="1",
                ),
                align="center",
                width="100%",
            ),
            rx.divider(),
            results_list(),
            pager,
            spacing="4",
            width="100%",
        ),
        padding="6",
    )
