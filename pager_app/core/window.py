"""
Page Window Calculator
======================

Maps (active page, total pages) to the ordered tokens a numbered pagination
control renders. Always anchors the first and last page and never shows more
than MAX_VISIBLE_PAGES tokens, ellipses included.

    [1], 2, 3, 4, 5, ..., 12          active < 5
    1, ..., 5, [6], 7, ..., 12        5 <= active < total - 3
    1, ..., 8, 9, [10], 11, 12        active >= total - 3
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from ..config import MAX_VISIBLE_PAGES, InvalidPaginationProps


# ============================================
# Tokens
# ============================================

@dataclass(frozen=True)
class PageNumber:
    """A selectable page"""
    page: int


@dataclass(frozen=True)
class EllipsisToken:
    """Inert placeholder for a run of hidden pages"""


ELLIPSIS = EllipsisToken()

PageToken = Union[PageNumber, EllipsisToken]
Window = Tuple[PageToken, ...]

# Both thresholds follow from MAX_VISIBLE_PAGES: first/last anchors, two
# ellipses and three centred pages.
_LEADING_BLOCK = MAX_VISIBLE_PAGES - 2
_TRAILING_OFFSET = MAX_VISIBLE_PAGES - 4


def _pages(*numbers: int) -> Tuple[PageNumber, ...]:
    return tuple(PageNumber(n) for n in numbers)


# ============================================
# Calculator
# ============================================

def compute_window(active_page: int, total_pages: int) -> Window:
    """
    Compute the tokens to display for a pagination control.

    Args:
        active_page: Currently selected page (1-indexed)
        total_pages: Number of pages, 0 when there is nothing to page through

    Returns:
        Window: tuple of PageNumber / EllipsisToken, at most MAX_VISIBLE_PAGES long

    Examples:
        >>> [getattr(t, "page", "...") for t in compute_window(6, 12)]
        [1, '...', 5, 6, 7, '...', 12]
    """
    if total_pages <= MAX_VISIBLE_PAGES:
        return _pages(*range(1, max(total_pages, 0) + 1))

    if active_page < _LEADING_BLOCK:
        return _pages(*range(1, _LEADING_BLOCK + 1)) + (ELLIPSIS, PageNumber(total_pages))

    if active_page < total_pages - _TRAILING_OFFSET:
        return (
            (PageNumber(1), ELLIPSIS)
            + _pages(active_page - 1, active_page, active_page + 1)
            + (ELLIPSIS, PageNumber(total_pages))
        )

    tail_start = total_pages - (_LEADING_BLOCK - 1)
    return (PageNumber(1), ELLIPSIS) + _pages(*range(tail_start, total_pages + 1))


# ============================================
# Helpers
# ============================================

def total_pages_for(total_results: int, results_per_page: int) -> int:
    """
    ceil(total_results / results_per_page), never negative

    Raises:
        InvalidPaginationProps: results_per_page <= 0
    """
    if results_per_page <= 0:
        raise InvalidPaginationProps(f"results_per_page must be positive, got {results_per_page}")
    return max(0, math.ceil(total_results / results_per_page))


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp page number to [1, total_pages] (a single page when there are none)."""
    return min(max(page, 1), max(total_pages, 1))


def showing_range(active_page: int, results_per_page: int, total_results: int) -> Tuple[int, int]:
    """Return the 1-indexed (first, last) result numbers shown on the active page."""
    if total_results <= 0:
        return 0, 0
    first = (active_page - 1) * results_per_page + 1
    last = min(active_page * results_per_page, total_results)
    return first, last


def to_display(window: Window, active_page: int) -> List[Dict[str, Any]]:
    """
    Flatten a window into the render model used by the Reflex component.

    Keys come from the token position, so the two ellipses of an interior
    window stay distinct.
    """
    items: List[Dict[str, Any]] = []
    for index, token in enumerate(window):
        if isinstance(token, PageNumber):
            items.append({
                "key": f"page-{index}",
                "kind": "page",
                "page": token.page,
                "active": token.page == active_page,
            })
        else:
            items.append({
                "key": f"ellipsis-{index}",
                "kind": "ellipsis",
                "page": 0,
                "active": False,
            })
    return items
