"""
Button Component
Themed button used by the pagination control (size/layout variants, optional icon)
"""

import reflex as rx
from typing import Optional, Union

from ..styles.theme import ICON_SIZE, button_class


def button(
    *children,
    size: str = "regular",
    layout: str = "primary",
    icon: Optional[str] = None,
    aria_label: Optional[str] = None,
    on_click=None,
    disabled: Union[bool, rx.Var] = False,
    **props
) -> rx.Component:
    """
    Standardized button

    Args:
        children: Label content (page number, text)
        size: larger, regular, small, pagination
        layout: primary, outline, link
        icon: Optional Lucide icon name, rendered alone when there are no children
        aria_label: Accessible name, required for icon-only buttons
        on_click: Event handler
        disabled: Static flag or a state Var
        **props: Additional Reflex props

    Example:
        ```python
        button(icon="chevron-left", size="small", layout="link",
               aria_label="Previous", on_click=State.prev, disabled=State.page == 1)
        ```
    """
    icon_only = bool(icon) and not children

    if isinstance(disabled, rx.Var):
        class_name = rx.cond(
            disabled,
            button_class(size, layout, disabled=True, icon_only=icon_only),
            button_class(size, layout, disabled=False, icon_only=icon_only),
        )
    else:
        class_name = button_class(size, layout, disabled=disabled, icon_only=icon_only)

    content = list(children)
    if icon:
        content.insert(0, rx.icon(icon, size=ICON_SIZE, custom_attrs={"aria-hidden": "true"}))

    custom_attrs = dict(props.pop("custom_attrs", {}))
    if aria_label:
        custom_attrs["aria-label"] = aria_label

    if on_click is not None:
        props["on_click"] = on_click

    return rx.el.button(
        *content,
        type="button",
        disabled=disabled,
        class_name=class_name,
        custom_attrs=custom_attrs,
        **props
    )
