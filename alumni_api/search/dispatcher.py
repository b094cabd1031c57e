"""Federated query dispatch: fan a query out to the collection endpoints and merge the results."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from alumni_api.core.config import Settings
from alumni_api.search.scoring import score
from alumni_api.search.types import ResultType, SearchFilters, SearchResult

logger = logging.getLogger(__name__)

DESCRIPTION_PREVIEW_CHARS = 100


class CollectionFetchError(Exception):
    """Raised when a collection endpoint returns an error status or cannot be reached."""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _preview(value: Any) -> str:
    return _text(value)[:DESCRIPTION_PREVIEW_CHARS] + "..."


def _image(value: Any) -> str | None:
    return _text(value) or None


def post_to_result(record: dict, query: str) -> SearchResult:
    author = record.get("author")
    if not isinstance(author, dict):
        author = {}
    content = _text(record.get("content"))
    return SearchResult(
        id=_text(record.get("id")),
        type=ResultType.POST,
        title=f"Post by {author.get('username') or 'Unknown'}",
        description=_preview(content),
        image=_image(record.get("image_url")),
        url="/feed",
        relevance=score(query, content),
    )


def alumni_to_result(record: dict, query: str) -> SearchResult:
    first_name = _text(record.get("first_name"))
    last_name = _text(record.get("last_name"))
    position = _text(record.get("current_position"))
    company = _text(record.get("current_company"))
    bio = _text(record.get("bio"))
    profile_id = _text(record.get("user_id") or record.get("id"))
    return SearchResult(
        id=profile_id,
        type=ResultType.ALUMNI,
        title=f"{first_name} {last_name}".strip() or "Alumni Member",
        description=position or company or bio or "Alumni member",
        image=_image(record.get("profile_picture")),
        url=f"/profile/{profile_id}",
        relevance=score(query, f"{first_name} {last_name} {company} {position} {bio}"),
    )


def event_to_result(record: dict, query: str) -> SearchResult:
    title = _text(record.get("title"))
    description = record.get("description")
    return SearchResult(
        id=_text(record.get("id")),
        type=ResultType.EVENT,
        title=title or "Untitled event",
        description=_preview(description) if description else "No description",
        image=_image(record.get("cover_image")),
        url="/events",
        relevance=score(query, f"{title} {_text(description)}"),
    )


def job_to_result(record: dict, query: str) -> SearchResult:
    title = _text(record.get("title"))
    company = _text(record.get("company"))
    return SearchResult(
        id=_text(record.get("id")),
        type=ResultType.JOB,
        title=title or "Untitled job",
        description=f"{company} - {record.get('location') or 'Remote'}",
        url="/job-portal",
        relevance=score(query, f"{title} {company}"),
    )


@dataclass(frozen=True)
class Collection:
    """One searchable collection endpoint and how its records map to results."""
    result_type: ResultType
    path: str
    key: str
    to_result: Callable[[dict, str], SearchResult]
    forwards_location: bool = False
    forwards_batch: bool = False


COLLECTIONS: tuple[Collection, ...] = (
    Collection(ResultType.POST, "/api/posts", "posts", post_to_result),
    Collection(
        ResultType.ALUMNI, "/api/alumni/search", "alumni", alumni_to_result,
        forwards_location=True, forwards_batch=True,
    ),
    Collection(ResultType.EVENT, "/api/events", "events", event_to_result, forwards_location=True),
    Collection(ResultType.JOB, "/api/jobs", "jobs", job_to_result, forwards_location=True),
)


def create_search_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """HTTP client for the collection endpoints. A None timeout setting disables timeouts."""
    return httpx.AsyncClient(
        base_url=settings.search_api_base_url,
        timeout=settings.search_request_timeout_seconds,
        transport=transport,
    )


class SearchDispatcher:
    """Issues one bounded lookup per selected collection concurrently and ranks the union.

    A collection that fails (error status, connection error) contributes nothing.
    Anything else going wrong (unparseable body, unexpected payload shape) empties
    the whole result set; both are logged and neither is raised to the caller.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        limit: int = 5,
        collections: tuple[Collection, ...] = COLLECTIONS,
    ):
        self._client = client
        self.limit = limit
        self.collections = collections

    def selected_collections(self, filters: SearchFilters) -> list[Collection]:
        return [c for c in self.collections if filters.includes(c.result_type)]

    def build_params(self, collection: Collection, query: str, filters: SearchFilters) -> dict[str, Any]:
        params: dict[str, Any] = {"search": query, "limit": self.limit}
        if collection.forwards_batch and filters.batch:
            params["batch"] = filters.batch
        if collection.forwards_location and filters.location:
            params["location"] = filters.location
        return params

    async def _fetch(self, collection: Collection, query: str, filters: SearchFilters) -> list[SearchResult]:
        try:
            r = await self._client.get(collection.path, params=self.build_params(collection, query, filters))
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CollectionFetchError(
                f"{collection.path} returned {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise CollectionFetchError(f"{collection.path} unavailable ({type(e).__name__})") from e

        data = r.json()
        records = data.get(collection.key) or []
        results = [collection.to_result(record, query) for record in records[: self.limit]]
        skipped = [r for r in results if not r.id]
        if skipped:
            logger.debug("Global search: %s dropped %d record(s) without an id", collection.key, len(skipped))
        return [r for r in results if r.id]

    async def search(self, query: str, filters: SearchFilters | None = None) -> list[SearchResult]:
        if not (query or "").strip():
            return []
        filters = filters or SearchFilters()
        selected = self.selected_collections(filters)
        try:
            batches = await asyncio.gather(
                *(self._fetch(c, query, filters) for c in selected),
                return_exceptions=True,
            )
            results: list[SearchResult] = []
            for collection, batch in zip(selected, batches):
                if isinstance(batch, CollectionFetchError):
                    logger.warning("Global search: %s skipped: %s", collection.key, batch)
                    continue
                if isinstance(batch, BaseException):
                    raise batch
                results.extend(batch)
            # list.sort is stable: equal scores keep fetch order
            results.sort(key=lambda r: r.relevance, reverse=True)
            return results
        except Exception:
            logger.exception("Global search error for query %r", query)
            return []
