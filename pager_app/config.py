"""
Pagination configuration
- Default constants shared by the calculator, controller and component
- Demo settings read from the environment
- PaginationProps: boundary validation of caller-supplied options
"""

import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .utils.logger import get_logger

logger = get_logger(__name__)


# Display limits
MAX_VISIBLE_PAGES = 7
DEFAULT_RESULTS_PER_PAGE = 10
DEFAULT_ACTIVE_PAGE = 1
RESULTS_PER_PAGE_OPTIONS = [10, 25, 50, 100]

# Demo page
DEMO_TOTAL_RESULTS = int(os.getenv("PAGER_DEMO_TOTAL_RESULTS", "120"))
DEMO_LABEL = os.getenv("PAGER_DEMO_LABEL", "Table navigation")


class InvalidPaginationProps(ValueError):
    """Raised when a caller breaks the pagination options contract"""


@dataclass
class PaginationProps:
    """
    Options accepted by the pagination control.

    Attributes:
        total_results: Number of results being paged (>= 0)
        label: Accessible name of the navigation region
        on_change: Callback or event handler receiving the new active page
        results_per_page: Page size (> 0)
        active_page: Initial active page, 1 when omitted
    """

    total_results: int
    label: str
    on_change: Optional[Callable[[int], Any]] = None
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE
    active_page: Optional[int] = None

    def validate(self) -> "PaginationProps":
        """
        Check the options, clamping what can be recovered.

        Raises:
            InvalidPaginationProps: non-integer counts, results_per_page <= 0
                or an empty label
        """
        for name in ("total_results", "results_per_page"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPaginationProps(f"{name} must be an integer, got {value!r}")

        if self.results_per_page <= 0:
            raise InvalidPaginationProps(
                f"results_per_page must be positive, got {self.results_per_page}"
            )

        if not self.label or not self.label.strip():
            raise InvalidPaginationProps("label is required")

        if self.total_results < 0:
            logger.warning(f"Negative total_results {self.total_results} clamped to 0")
            self.total_results = 0

        if self.active_page is not None and (
            isinstance(self.active_page, bool) or not isinstance(self.active_page, int)
        ):
            raise InvalidPaginationProps(f"active_page must be an integer, got {self.active_page!r}")

        return self
