"""Where selecting a search result takes the user."""

from alumni_api.search.types import ResultType, SearchResult

PROFILE_ROUTE = "/profile/{id}"


def navigation_target(result: SearchResult) -> str:
    """Alumni open their profile; every other kind lands on its collection page (``result.url``)."""
    if result.type == ResultType.ALUMNI:
        return PROFILE_ROUTE.format(id=result.id)
    return result.url
