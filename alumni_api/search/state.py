"""Search surface state and its pure transitions.

Every transition takes a ``SearchState`` and returns a new one; nothing here
touches the network, timers or history.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional

from alumni_api.search.types import SearchFilters, SearchResult


class SurfacePhase(str, Enum):
    CLOSED = "closed"
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    SEARCHING = "searching"
    RESULTS = "results"
    EMPTY = "empty"


@dataclass(frozen=True)
class SearchState:
    is_open: bool = False
    query: str = ""
    filters: SearchFilters = field(default_factory=SearchFilters)
    results: tuple[SearchResult, ...] = ()
    is_searching: bool = False
    debounce_pending: bool = False
    show_filters: bool = False
    # Query whose response was last committed; None until a search completes
    completed_query: Optional[str] = None
    # Bumped by every dispatched search, clear and close; responses from older generations are dropped
    generation: int = 0

    @property
    def phase(self) -> SurfacePhase:
        if not self.is_open:
            return SurfacePhase.CLOSED
        if self.is_searching:
            return SurfacePhase.SEARCHING
        if self.debounce_pending:
            return SurfacePhase.DEBOUNCING
        if self.results:
            return SurfacePhase.RESULTS
        if self.completed_query is not None:
            return SurfacePhase.EMPTY
        return SurfacePhase.IDLE

    @property
    def top_result(self) -> Optional[SearchResult]:
        return self.results[0] if self.results else None


def opened(state: SearchState) -> SearchState:
    return replace(state, is_open=True)


def closed(state: SearchState) -> SearchState:
    """Reset query, results, filters and the filter panel. History lives outside the state."""
    return SearchState(generation=state.generation + 1)


def query_changed(state: SearchState, query: str) -> SearchState:
    return replace(state, query=query)


def results_cleared(state: SearchState) -> SearchState:
    return replace(
        state,
        results=(),
        is_searching=False,
        debounce_pending=False,
        completed_query=None,
        generation=state.generation + 1,
    )


def debounce_scheduled(state: SearchState) -> SearchState:
    return replace(state, debounce_pending=True)


def debounce_cancelled(state: SearchState) -> SearchState:
    return replace(state, debounce_pending=False)


def search_started(state: SearchState) -> SearchState:
    """Begin a new search generation. Previous results are dropped immediately."""
    return replace(
        state,
        results=(),
        is_searching=True,
        debounce_pending=False,
        generation=state.generation + 1,
    )


def search_finished(
    state: SearchState, generation: int, query: str, results: Iterable[SearchResult]
) -> SearchState:
    """Commit a response, unless a newer search, a clear or a close has happened since it was dispatched."""
    if generation != state.generation or not state.is_open:
        return state
    return replace(
        state,
        results=tuple(results),
        is_searching=False,
        completed_query=query,
    )


def filters_changed(state: SearchState, filters: SearchFilters) -> SearchState:
    return replace(state, filters=filters)


def filter_panel_toggled(state: SearchState) -> SearchState:
    return replace(state, show_filters=not state.show_filters)
