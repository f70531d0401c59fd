"""
Paging Controller
=================

State machine behind the pagination control. States are "active page = k"
for k in [1, total_pages]; events move between them:

    GoToPrevious   k -> k-1      (k > 1)
    GoToNext       k -> k+1      (k < total_pages)
    SelectPage(j)  k -> j        (1 <= j <= total_pages)
    Resize         clamps k into the new page range
    Initialize     sets k from an optional override, always notifies

transition() is pure: (state, event) -> Transition(state, window, notification).
PagingController keeps the current state and forwards notifications to the
caller's on_change.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from ..config import DEFAULT_ACTIVE_PAGE, DEFAULT_RESULTS_PER_PAGE
from ..utils.logger import get_logger
from .window import Window, clamp_page, compute_window, total_pages_for

logger = get_logger(__name__)


@dataclass(frozen=True)
class PagingState:
    active_page: int = DEFAULT_ACTIVE_PAGE
    total_pages: int = 0

    @property
    def can_go_previous(self) -> bool:
        return self.active_page > 1

    @property
    def can_go_next(self) -> bool:
        return self.active_page < self.total_pages


# ============================================
# Events
# ============================================

@dataclass(frozen=True)
class Initialize:
    active_page: Optional[int] = None


@dataclass(frozen=True)
class GoToPrevious:
    pass


@dataclass(frozen=True)
class GoToNext:
    pass


@dataclass(frozen=True)
class SelectPage:
    page: int


@dataclass(frozen=True)
class Resize:
    total_results: int
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE


PagingEvent = Union[Initialize, GoToPrevious, GoToNext, SelectPage, Resize]


@dataclass(frozen=True)
class Transition:
    """Outcome of one event: new state, its window, and the page to notify (or None)."""
    state: PagingState
    window: Window
    notification: Optional[int] = None

    @property
    def changed(self) -> bool:
        return self.notification is not None


# ============================================
# Transition function
# ============================================

def _commit(state: PagingState, page: int, force: bool = False) -> Transition:
    new_state = PagingState(active_page=page, total_pages=state.total_pages)
    window = compute_window(new_state.active_page, new_state.total_pages)
    notify = force or page != state.active_page
    return Transition(new_state, window, page if notify else None)


def transition(state: PagingState, event: PagingEvent) -> Transition:
    """
    Apply one event to a paging state.

    Guarded events that would leave [1, total_pages] produce the unchanged
    state with no notification.
    """
    if isinstance(event, Initialize):
        page = DEFAULT_ACTIVE_PAGE
        if event.active_page is not None:
            if 1 <= event.active_page <= state.total_pages:
                page = event.active_page
            else:
                logger.debug(f"Initial page {event.active_page} out of range, starting at {page}")
        return _commit(state, page, force=True)

    if isinstance(event, GoToPrevious):
        if not state.can_go_previous:
            return _commit(state, state.active_page)
        return _commit(state, state.active_page - 1)

    if isinstance(event, GoToNext):
        if not state.can_go_next:
            return _commit(state, state.active_page)
        return _commit(state, state.active_page + 1)

    if isinstance(event, SelectPage):
        if not 1 <= event.page <= state.total_pages:
            logger.debug(f"Ignoring out of range page {event.page} (total {state.total_pages})")
            return _commit(state, state.active_page)
        return _commit(state, event.page)

    if isinstance(event, Resize):
        total_pages = total_pages_for(event.total_results, event.results_per_page)
        resized = PagingState(active_page=state.active_page, total_pages=total_pages)
        return _commit(resized, clamp_page(state.active_page, total_pages))

    raise TypeError(f"Unknown paging event: {event!r}")


# ============================================
# Controller
# ============================================

class PagingController:
    """
    Owns the active page of one pagination control.

    Example:
        >>> pages = []
        >>> controller = PagingController(total_results=120, on_change=pages.append)
        >>> controller.initialize()
        >>> controller.go_to_next()
        >>> pages
        [1, 2]
    """

    def __init__(
        self,
        total_results: int,
        results_per_page: int = DEFAULT_RESULTS_PER_PAGE,
        on_change: Optional[Callable[[int], Any]] = None,
    ):
        self.on_change = on_change
        self.results_per_page = results_per_page
        self.state = PagingState(total_pages=total_pages_for(total_results, results_per_page))
        self.window: Window = compute_window(self.state.active_page, self.state.total_pages)

    @property
    def active_page(self) -> int:
        return self.state.active_page

    @property
    def total_pages(self) -> int:
        return self.state.total_pages

    @property
    def can_go_previous(self) -> bool:
        return self.state.can_go_previous

    @property
    def can_go_next(self) -> bool:
        return self.state.can_go_next

    def dispatch(self, event: PagingEvent) -> Transition:
        """Run one event to completion: update state and window, then notify."""
        result = transition(self.state, event)
        self.state = result.state
        self.window = result.window
        if result.changed:
            logger.debug(f"Active page -> {result.notification}")
            if self.on_change is not None:
                self.on_change(result.notification)
        return result

    def initialize(self, active_page: Optional[int] = None) -> PagingState:
        self.dispatch(Initialize(active_page))
        return self.state

    def go_to_previous(self) -> None:
        self.dispatch(GoToPrevious())

    def go_to_next(self) -> None:
        self.dispatch(GoToNext())

    def select_page(self, page: int) -> None:
        self.dispatch(SelectPage(page))

    def resize(self, total_results: int, results_per_page: Optional[int] = None) -> None:
        """Apply new totals, clamping the active page into the new range."""
        per_page = self.results_per_page if results_per_page is None else results_per_page
        self.dispatch(Resize(total_results, per_page))
        self.results_per_page = per_page
