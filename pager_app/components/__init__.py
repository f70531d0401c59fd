"""Pagination components"""
from .button import button
from .pagination import (
    PaginationState,
    empty_page_button,
    navigation_button,
    page_button,
    pagination,
)

__all__ = [
    "button",
    "PaginationState",
    "empty_page_button",
    "navigation_button",
    "page_button",
    "pagination",
]
