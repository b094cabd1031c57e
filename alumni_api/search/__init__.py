"""Global search client: federated dispatch, relevance ranking, debounced sessions and history."""

from .types import ResultType, SearchFilters, SearchResult
from .scoring import score
from .dispatcher import CollectionFetchError, SearchDispatcher, create_search_client
from .history import SearchHistory, push_history
from .navigation import navigation_target
from .state import SearchState, SurfacePhase
from .debounce import DebounceTimer
from .session import SearchSession

__all__ = [
    "ResultType",
    "SearchFilters",
    "SearchResult",
    "score",
    "CollectionFetchError",
    "SearchDispatcher",
    "create_search_client",
    "SearchHistory",
    "push_history",
    "navigation_target",
    "SearchState",
    "SurfacePhase",
    "DebounceTimer",
    "SearchSession",
]
