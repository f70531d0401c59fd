"""Framework-independent paging logic"""
from .window import (
    ELLIPSIS,
    EllipsisToken,
    PageNumber,
    PageToken,
    Window,
    clamp_page,
    compute_window,
    showing_range,
    to_display,
    total_pages_for,
)
from .controller import (
    GoToNext,
    GoToPrevious,
    Initialize,
    PagingController,
    PagingState,
    Resize,
    SelectPage,
    Transition,
    transition,
)

__all__ = [
    "ELLIPSIS",
    "EllipsisToken",
    "PageNumber",
    "PageToken",
    "Window",
    "clamp_page",
    "compute_window",
    "showing_range",
    "to_display",
    "total_pages_for",
    "GoToNext",
    "GoToPrevious",
    "Initialize",
    "PagingController",
    "PagingState",
    "Resize",
    "SelectPage",
    "Transition",
    "transition",
]
