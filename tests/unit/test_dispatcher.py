"""SearchDispatcher against a mocked collection API (httpx.MockTransport)."""

import json

import httpx
import pytest

from alumni_api.search.dispatcher import (
    SearchDispatcher,
    alumni_to_result,
    event_to_result,
    job_to_result,
    post_to_result,
)
from alumni_api.search.types import ResultType, SearchFilters

BASE_URL = "http://api.test"


def _payloads(n: int = 2) -> dict[str, dict]:
    return {
        "/api/posts": {"posts": [
            {"id": f"p{i}", "content": f"priya shared post {i}", "author": {"username": "priya"}}
            for i in range(n)
        ]},
        "/api/alumni/search": {"alumni": [
            {"id": f"a{i}", "user_id": f"u{i}", "first_name": "Priya", "last_name": f"Patel{i}",
             "current_position": "Engineer"}
            for i in range(n)
        ]},
        "/api/events": {"events": [
            {"id": f"e{i}", "title": f"Meetup {i}", "description": "priya hosts"} for i in range(n)
        ]},
        "/api/jobs": {"jobs": [
            {"id": f"j{i}", "title": f"Job {i}", "company": "Acme", "location": "Pune"} for i in range(n)
        ]},
    }


class Recorder:
    """Mock transport handler that serves canned payloads and records requests."""

    def __init__(self, payloads: dict[str, dict], failing: dict[str, int] | None = None):
        self.payloads = payloads
        self.failing = failing or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.failing:
            return httpx.Response(self.failing[path], json={"detail": "boom"})
        return httpx.Response(200, json=self.payloads.get(path, {}))

    def paths(self) -> set[str]:
        return {r.url.path for r in self.requests}

    def params_for(self, path: str) -> dict[str, str]:
        for r in self.requests:
            if r.url.path == path:
                return dict(r.url.params)
        raise KeyError(path)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder(_payloads())


@pytest.fixture
async def dispatcher(recorder: Recorder):
    async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
        yield SearchDispatcher(client, limit=5)


class TestRouting:
    async def test_all_queries_every_collection(self, dispatcher, recorder) -> None:
        results = await dispatcher.search("priya")
        assert recorder.paths() == {"/api/posts", "/api/alumni/search", "/api/events", "/api/jobs"}
        assert {r.type for r in results} == {ResultType.POST, ResultType.ALUMNI, ResultType.EVENT, ResultType.JOB}

    async def test_type_filter_queries_only_that_collection(self, dispatcher, recorder) -> None:
        results = await dispatcher.search("priya", SearchFilters(type="alumni"))
        assert recorder.paths() == {"/api/alumni/search"}
        assert results
        assert all(r.type == ResultType.ALUMNI for r in results)
        assert all(r.relevance >= 50 for r in results)

    async def test_blank_query_sends_nothing(self, dispatcher, recorder) -> None:
        assert await dispatcher.search("   ") == []
        assert recorder.requests == []


class TestParams:
    async def test_search_and_limit_always_sent(self, dispatcher, recorder) -> None:
        await dispatcher.search("data")
        for path in recorder.paths():
            params = recorder.params_for(path)
            assert params["search"] == "data"
            assert params["limit"] == "5"

    async def test_batch_only_to_alumni(self, dispatcher, recorder) -> None:
        await dispatcher.search("data", SearchFilters(batch="2020"))
        assert recorder.params_for("/api/alumni/search")["batch"] == "2020"
        for path in ("/api/posts", "/api/events", "/api/jobs"):
            assert "batch" not in recorder.params_for(path)

    async def test_location_not_sent_to_posts(self, dispatcher, recorder) -> None:
        await dispatcher.search("data", SearchFilters(location="Pune"))
        for path in ("/api/alumni/search", "/api/events", "/api/jobs"):
            assert recorder.params_for(path)["location"] == "Pune"
        assert "location" not in recorder.params_for("/api/posts")

    async def test_blank_filters_not_sent(self, dispatcher, recorder) -> None:
        await dispatcher.search("data", SearchFilters(location="  ", batch=""))
        assert "location" not in recorder.params_for("/api/jobs")
        assert "batch" not in recorder.params_for("/api/alumni/search")


class TestMerging:
    async def test_at_most_limit_per_collection(self) -> None:
        recorder = Recorder(_payloads(n=8))
        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
            results = await SearchDispatcher(client, limit=5).search("priya")
        assert len(results) == 20
        for result_type in (ResultType.POST, ResultType.ALUMNI, ResultType.EVENT, ResultType.JOB):
            assert sum(1 for r in results if r.type == result_type) == 5

    async def test_sorted_by_relevance_descending(self, dispatcher) -> None:
        results = await dispatcher.search("priya")
        scores = [r.relevance for r in results]
        assert scores == sorted(scores, reverse=True)

    async def test_ties_keep_fetch_order(self) -> None:
        payloads = {
            "/api/posts": {"posts": [{"id": "p1", "content": "x"}, {"id": "p2", "content": "x"}]},
            "/api/jobs": {"jobs": [{"id": "j1", "title": "x"}]},
        }
        recorder = Recorder(payloads)
        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
            results = await SearchDispatcher(client).search("zz")
        assert [r.id for r in results] == ["p1", "p2", "j1"]

    async def test_failed_collection_is_skipped(self) -> None:
        recorder = Recorder(_payloads(), failing={"/api/events": 500})
        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
            results = await SearchDispatcher(client).search("priya")
        assert {r.type for r in results} == {ResultType.POST, ResultType.ALUMNI, ResultType.JOB}

    async def test_connection_error_is_skipped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/posts":
                raise httpx.ConnectError("refused", request=request)
            return httpx.Response(200, json=_payloads()[request.url.path])

        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
            results = await SearchDispatcher(client).search("priya")
        assert results
        assert ResultType.POST not in {r.type for r in results}

    async def test_unparseable_body_empties_result_set(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/jobs":
                return httpx.Response(200, content=b"<html>not json</html>")
            return httpx.Response(200, json=_payloads()[request.url.path])

        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
            assert await SearchDispatcher(client).search("priya") == []

    async def test_missing_key_contributes_nothing(self) -> None:
        recorder = Recorder({"/api/posts": {"unexpected": []}, "/api/jobs": _payloads()["/api/jobs"]})
        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
            results = await SearchDispatcher(client).search("job")
        assert {r.type for r in results} == {ResultType.JOB}


class TestRecordMapping:
    def test_post(self) -> None:
        content = "a" * 150
        result = post_to_result({"id": 7, "content": content, "author": {"username": "priya"}}, "aaa")
        assert result.id == "7"
        assert result.title == "Post by priya"
        assert result.description == "a" * 100 + "..."
        assert result.url == "/feed"

    def test_post_without_author(self) -> None:
        assert post_to_result({"id": "1", "content": "hi"}, "hi").title == "Post by Unknown"

    def test_alumni_prefers_user_id(self) -> None:
        result = alumni_to_result(
            {"id": "row-1", "user_id": "user-9", "first_name": "Priya", "last_name": "Patel",
             "current_company": "Acme"},
            "priya",
        )
        assert result.id == "user-9"
        assert result.url == "/profile/user-9"
        assert result.title == "Priya Patel"
        assert result.description == "Acme"
        assert result.relevance == 60

    def test_alumni_fallbacks(self) -> None:
        result = alumni_to_result({"id": "x"}, "q")
        assert result.title == "Alumni Member"
        assert result.description == "Alumni member"
        assert result.id == "x"

    def test_event_without_description(self) -> None:
        result = event_to_result({"id": "e", "title": "Gala"}, "gala")
        assert result.description == "No description"
        assert result.url == "/events"

    def test_job_defaults_to_remote(self) -> None:
        result = job_to_result({"id": "j", "title": "Backend Engineer", "company": "Acme"}, "backend")
        assert result.description == "Acme - Remote"
        assert result.url == "/job-portal"
        assert result.relevance == 60


class TestMalformedRecords:
    def test_non_string_image_is_coerced(self) -> None:
        assert post_to_result({"id": "p1", "content": "x", "image_url": 123}, "x").image == "123"
        assert alumni_to_result({"id": "a1", "profile_picture": 42}, "x").image == "42"
        assert event_to_result({"id": "e1", "cover_image": ""}, "x").image is None

    def test_non_dict_author(self) -> None:
        assert post_to_result({"id": "p1", "content": "hi", "author": "bob"}, "hi").title == "Post by Unknown"

    async def test_bad_field_does_not_empty_other_collections(self) -> None:
        payloads = _payloads()
        payloads["/api/posts"] = {"posts": [
            {"id": "p1", "content": "priya talk", "image_url": 123, "author": "bob"},
        ]}
        recorder = Recorder(payloads)
        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
            results = await SearchDispatcher(client).search("priya")
        assert {r.type for r in results} == {ResultType.POST, ResultType.ALUMNI, ResultType.EVENT, ResultType.JOB}
        post = next(r for r in results if r.type == ResultType.POST)
        assert post.image == "123"
        assert post.title == "Post by Unknown"

    async def test_records_without_id_are_dropped(self) -> None:
        payloads = {"/api/alumni/search": {"alumni": [
            {"first_name": "Priya", "last_name": "Ghost"},
            {"user_id": "u1", "first_name": "Priya", "last_name": "Patel"},
        ]}}
        recorder = Recorder(payloads)
        async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
            results = await SearchDispatcher(client).search("priya", SearchFilters(type="alumni"))
        assert [(r.id, r.url) for r in results] == [("u1", "/profile/u1")]
