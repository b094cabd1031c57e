"""Global search session: keystrokes, debounce, filters and the search surface lifecycle."""

import asyncio
import logging
from typing import Any, Callable, Optional

from alumni_api.core.config import Settings, get_settings
from alumni_api.search.debounce import DebounceTimer
from alumni_api.search.dispatcher import SearchDispatcher
from alumni_api.search.history import SearchHistory
from alumni_api.search.navigation import navigation_target
from alumni_api.search.state import (
    SearchState,
    SurfacePhase,
    closed,
    debounce_cancelled,
    debounce_scheduled,
    filter_panel_toggled,
    filters_changed,
    opened,
    query_changed,
    results_cleared,
    search_finished,
    search_started,
)
from alumni_api.search.types import SearchFilters, SearchResult

logger = logging.getLogger(__name__)

Navigator = Callable[[str], Any]

FORWARDED_FILTERS = ("type", "location", "batch")


class SearchSession:
    """Owns one ``SearchState`` and drives it from user input.

    Input handlers (``set_query``, ``press_enter``, ``set_filters`` ...) are
    synchronous, like UI event callbacks; they must be called from inside a
    running event loop because they may schedule the debounce timer or a search
    task. Only the response of the latest search generation is committed.
    """

    def __init__(
        self,
        dispatcher: SearchDispatcher,
        history: SearchHistory,
        navigate: Optional[Navigator] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self._dispatcher = dispatcher
        self._history = history
        self._navigate = navigate
        self._timer = DebounceTimer()
        self._inflight: set[asyncio.Task] = set()
        self._state = SearchState()
        self.debounce_seconds = settings.search_debounce_ms / 1000
        self.min_query_length = settings.search_min_query_length
        self.history_min_query_length = settings.search_history_min_query_length

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def phase(self) -> SurfacePhase:
        return self._state.phase

    @property
    def results(self) -> tuple[SearchResult, ...]:
        return self._state.results

    @property
    def history(self) -> list[str]:
        return self._history.entries

    def _long_enough(self, query: str) -> bool:
        return len(query.strip()) >= self.min_query_length

    # Surface lifecycle

    def open(self) -> None:
        self._state = opened(self._state)

    def close(self) -> None:
        """Escape, outside click or the close control. History is left alone."""
        self._timer.cancel()
        self._state = closed(self._state)

    def click_outside(self) -> None:
        self.close()

    def handle_key(self, key: str, ctrl: bool = False, meta: bool = False) -> Optional[str]:
        """Global and input key bindings: Ctrl/Cmd+K opens, Escape closes, Enter submits."""
        if (ctrl or meta) and key.lower() == "k":
            self.open()
        elif key == "Escape":
            self.close()
        elif key == "Enter":
            return self.press_enter()
        return None

    # Input

    def set_query(self, query: str) -> None:
        """Handle a change of the query text."""
        self._state = query_changed(self._state, query)
        if self._timer.cancel():
            self._state = debounce_cancelled(self._state)

        if not query.strip():
            self._state = results_cleared(self._state)
            return
        if self._long_enough(query):
            self._timer.schedule(self.debounce_seconds, self._on_debounce_fired)
            self._state = debounce_scheduled(self._state)

    def press_enter(self) -> Optional[str]:
        """Open the top result if there is one, otherwise search right away."""
        top = self._state.top_result
        if top is not None:
            return self.select(top)
        if self._long_enough(self._state.query):
            self._start_search()
        return None

    def select(self, result: SearchResult) -> str:
        """Close the surface and navigate to the result's target. Returns the target."""
        target = navigation_target(result)
        self.close()
        if self._navigate is not None:
            self._navigate(target)
        return target

    def recall(self, query: str) -> None:
        """Re-run a history entry as if it had been typed."""
        self.set_query(query)

    def clear_history(self) -> None:
        self._history.clear()

    # Filters

    def toggle_filters(self) -> None:
        self._state = filter_panel_toggled(self._state)

    def set_filters(self, **changes: Any) -> None:
        """Update type/location/batch/date_range.

        Re-searches immediately when the query is long enough and a filter that
        is sent to the collections (type, location, batch) actually changed.
        """
        before = self._state.filters
        filters = SearchFilters.model_validate({**before.model_dump(), **changes})
        self._state = filters_changed(self._state, filters)
        if any(getattr(before, name) != getattr(filters, name) for name in FORWARDED_FILTERS):
            self.apply_filters()

    def clear_filters(self) -> None:
        self._state = filters_changed(self._state, SearchFilters())
        self.apply_filters()

    def apply_filters(self) -> None:
        if self._long_enough(self._state.query):
            self._start_search()

    # Searching

    def _on_debounce_fired(self) -> None:
        self._start_search()

    def _start_search(self) -> None:
        task = asyncio.get_running_loop().create_task(self.search_now())
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def search_now(self) -> list[SearchResult]:
        """Dispatch the current query and filters; commit only if still the latest generation."""
        if self._timer.cancel():
            self._state = debounce_cancelled(self._state)
        query, filters = self._state.query, self._state.filters
        self._state = search_started(self._state)
        generation = self._state.generation

        results = await self._dispatcher.search(query, filters)

        before = self._state
        self._state = search_finished(self._state, generation, query, results)
        if self._state is before:
            logger.debug("Dropped stale search response for %r (generation %d)", query, generation)
            return results
        if results and len(query.strip()) >= self.history_min_query_length:
            self._history.add(query)
        return results

    async def wait_idle(self) -> None:
        """Wait for the pending debounce (if any) and every in-flight search to finish."""
        while self._timer.pending or self._inflight:
            await self._timer.wait()
            if self._inflight:
                await asyncio.wait(set(self._inflight))
