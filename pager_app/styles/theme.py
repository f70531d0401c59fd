"""
Pagination Theme Tokens
=======================

Tailwind class strings for the pagination control and the button it renders
with. TailwindV3Plugin in rxconfig.py compiles them.
"""

from typing import Dict, Literal

# ============================================
# Pagination
# ============================================

PAGINATION = {
    "base": "flex flex-col justify-between text-xs sm:flex-row text-gray-600 dark:text-gray-400",
    "summary": "flex items-center font-semibold tracking-wide uppercase",
    "nav_wrapper": "flex mt-4 justify-center sm:mt-auto sm:justify-end",
    "list": "inline-flex items-center",
    "ellipsis": "px-2 py-1",
}

# ============================================
# Button
# ============================================

ButtonSize = Literal["larger", "regular", "small", "pagination"]
ButtonLayout = Literal["primary", "outline", "link"]

BUTTON_BASE = (
    "align-bottom inline-flex items-center justify-center cursor-pointer leading-5 "
    "transition-colors duration-150 font-medium focus:outline-none"
)

BUTTON_SIZES: Dict[str, str] = {
    "larger": "px-10 py-4 rounded-lg",
    "regular": "px-4 py-2 rounded-lg text-sm",
    "small": "px-3 py-1 rounded-md text-sm",
    "pagination": "px-3 py-1 rounded-md text-xs",
}

# Icon-only buttons use square padding
BUTTON_ICON_SIZES: Dict[str, str] = {
    "larger": "p-4 rounded-lg",
    "regular": "p-2 rounded-lg",
    "small": "p-2 rounded-md",
    "pagination": "p-2 rounded-md",
}

BUTTON_LAYOUTS: Dict[str, Dict[str, str]] = {
    "primary": {
        "base": "text-white bg-purple-600 border border-transparent",
        "active": "active:bg-purple-600 hover:bg-purple-700 focus:ring focus:ring-purple-300",
        "disabled": "opacity-50 cursor-not-allowed",
    },
    "outline": {
        "base": "text-gray-600 border-gray-300 border dark:text-gray-400 focus:outline-none",
        "active": "active:bg-transparent hover:border-gray-500 focus:border-gray-500 "
                  "active:text-gray-500 focus:ring focus:ring-gray-300",
        "disabled": "opacity-50 cursor-not-allowed bg-gray-300",
    },
    "link": {
        "base": "text-gray-600 dark:text-gray-400 focus:outline-none border border-transparent",
        "active": "active:bg-transparent hover:bg-gray-100 focus:ring focus:ring-gray-300 "
                  "dark:hover:bg-gray-500 dark:hover:text-gray-300 dark:hover:bg-opacity-10",
        "disabled": "opacity-50 cursor-not-allowed",
    },
}

# ============================================
# Icons (Lucide)
# ============================================

ICONS = {
    "prev": "chevron-left",
    "next": "chevron-right",
}

ICON_SIZE = 20


def button_class(size: str, layout: str, disabled: bool = False, icon_only: bool = False) -> str:
    """
    Compose the class string for a button.

    Unknown sizes fall back to "regular", unknown layouts to "primary".

    Examples:
        >>> button_class("pagination", "link")
        'align-bottom ... px-3 py-1 rounded-md text-xs text-gray-600 ...'
    """
    sizes = BUTTON_ICON_SIZES if icon_only else BUTTON_SIZES
    layout_classes = BUTTON_LAYOUTS.get(layout, BUTTON_LAYOUTS["primary"])
    state = "disabled" if disabled else "active"
    return " ".join([
        BUTTON_BASE,
        sizes.get(size, sizes["regular"]),
        layout_classes["base"],
        layout_classes[state],
    ])
