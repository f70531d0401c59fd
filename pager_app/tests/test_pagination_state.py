"""
Tests for the pagination component state

Covers:
- Event handlers of the per-control PaginationState
- Forwarding of the new page to the caller's handler
- Display items refreshed on every transition
- Demo results state following the control's on_change
"""

import pytest
import reflex as rx
from reflex.event import EventSpec
from reflex.utils import console

from pager_app.components.pagination import pagination
from pager_app.config import InvalidPaginationProps
from pager_app.states.results_state import ResultsState


class PageSink(rx.State):
    """Stand-in caller receiving on_change"""

    page: int = 0

    @rx.event
    def set_page(self, page: int):
        self.page = page


def make_state(on_change=None):
    component = pagination(total_results=120, label="Table navigation", on_change=on_change)
    state_cls = component.State
    return state_cls, state_cls(_reflex_internal_init=True)


def notified_page(spec: EventSpec) -> str:
    assert isinstance(spec, EventSpec)
    assert spec.handler.fn is PageSink.set_page.fn
    return str(spec.args[0][1])


@pytest.fixture
def pager():
    """Mounted control: 120 results, 10 per page"""
    state_cls, state = make_state(on_change=PageSink.set_page)
    state_cls.initialize.fn(state, 120, 10, 0)
    return state_cls, state


class TestInitialize:

    def test_missing_override_starts_at_first_page(self):
        state_cls, state = make_state(on_change=PageSink.set_page)

        spec = state_cls.initialize.fn(state, 120, 10, 0)

        assert state.active_page == 1
        assert notified_page(spec) == "1"

    def test_override(self):
        state_cls, state = make_state(on_change=PageSink.set_page)

        spec = state_cls.initialize.fn(state, 120, 10, 6)

        assert state.active_page == 6
        assert notified_page(spec) == "6"

    def test_out_of_range_override(self):
        state_cls, state = make_state(on_change=PageSink.set_page)

        spec = state_cls.initialize.fn(state, 120, 10, 40)

        assert state.active_page == 1
        assert notified_page(spec) == "1"

    def test_negative_total_is_clamped(self, monkeypatch):
        warnings = []
        monkeypatch.setattr(console, "warn", lambda msg, **kwargs: warnings.append(msg))
        state_cls, state = make_state()

        state_cls.initialize.fn(state, -5, 10, 0)

        assert state.total_results == 0
        assert list(state.pages) == []
        assert len(warnings) == 1
        assert "-5" in warnings[0]

    def test_non_positive_page_size(self):
        state_cls, state = make_state()

        with pytest.raises(InvalidPaginationProps):
            state_cls.initialize.fn(state, 120, 0, 0)

        assert state.results_per_page == 10

    def test_without_handler(self):
        state_cls, state = make_state()

        assert state_cls.initialize.fn(state, 120, 10, 0) is None
        assert state.active_page == 1


class TestNavigation:

    def test_next_forwards_page(self, pager):
        state_cls, state = pager

        spec = state_cls.go_to_next.fn(state)

        assert state.active_page == 2
        assert notified_page(spec) == "2"

    def test_previous_on_first_page_returns_nothing(self, pager):
        state_cls, state = pager

        assert state_cls.go_to_previous.fn(state) is None
        assert state.active_page == 1

    def test_next_on_last_page_returns_nothing(self, pager):
        state_cls, state = pager
        state_cls.select_page.fn(state, 12)

        assert state_cls.go_to_next.fn(state) is None
        assert state.active_page == 12

    def test_select_page_refreshes_display(self, pager):
        state_cls, state = pager

        spec = state_cls.select_page.fn(state, 6)

        assert notified_page(spec) == "6"
        assert [item["page"] for item in state.pages if item["kind"] == "page"] == [1, 5, 6, 7, 12]
        assert [item["page"] for item in state.pages if item["active"]] == [6]
        assert [item["kind"] for item in state.pages].count("ellipsis") == 2

    def test_select_current_page_returns_nothing(self, pager):
        state_cls, state = pager

        assert state_cls.select_page.fn(state, 1) is None

    def test_resize_clamps_and_notifies(self, pager):
        state_cls, state = pager
        state_cls.select_page.fn(state, 12)

        spec = state_cls.resize.fn(state, 120, 50)

        assert state.active_page == 3
        assert state.results_per_page == 50
        assert notified_page(spec) == "3"
        assert [item["page"] for item in state.pages] == [1, 2, 3]

    def test_resize_within_range_returns_nothing(self, pager):
        state_cls, state = pager

        assert state_cls.resize.fn(state, 120, 25) is None
        assert state.active_page == 1

    def test_controls_are_independent(self, pager):
        state_cls, state = pager
        other_cls, other = make_state()
        other_cls.initialize.fn(other, 120, 10, 0)

        state_cls.select_page.fn(state, 5)

        assert other_cls is not state_cls
        assert other.active_page == 1


class TestResultsState:

    def test_page_size_does_not_move_page(self):
        state = ResultsState(_reflex_internal_init=True)
        state.page = 12

        ResultsState.set_page_size.fn(state, "50")

        assert state.page_size == 50
        assert state.page == 12

    def test_page_follows_on_change(self):
        state = ResultsState(_reflex_internal_init=True)

        ResultsState.set_page.fn(state, 3)

        assert state.page == 3
