"""
Demo results state
- Generated result rows
- Page driven only by the pagination control's on_change
"""

import reflex as rx
from typing import List
from reflex.utils import console

from ..config import DEFAULT_RESULTS_PER_PAGE, DEMO_TOTAL_RESULTS


class ResultsState(rx.State):
    """Caller side of the pagination control"""

    total_results: int = DEMO_TOTAL_RESULTS
    page: int = 1
    page_size: int = DEFAULT_RESULTS_PER_PAGE

    @rx.var
    def visible_results(self) -> List[str]:
        """Rows on the current page"""
        start = (self.page - 1) * self.page_size
        end = min(start + self.page_size, self.total_results)
        return [f"Result #{n}" for n in range(start + 1, end + 1)]

    @rx.event
    def set_page(self, page: int):
        """Pagination on_change"""
        self.page = int(page)
        console.info(f"Results page changed: {self.page}")

    @rx.event
    def set_page_size(self, value: str):
        """Page size selector; the control's resize reports any page change"""
        self.page_size = int(value)
