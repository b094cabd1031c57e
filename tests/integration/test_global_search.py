"""Global search end to end: dispatcher and session against the real collection endpoints."""

import pytest
from httpx import ASGITransport

from alumni_api.core.config import Settings, get_settings
from alumni_api.db.models import Event, Job, Post
from alumni_api.main import app
from alumni_api.search import ResultType, SearchDispatcher, SearchFilters, SearchHistory, SearchSession
from alumni_api.search.dispatcher import create_search_client


@pytest.fixture
async def network(db_session, make_user):
    priya = await make_user(
        "priya@example.com", first_name="Priya", last_name="Patel", batch="2020",
        location="Pune", current_position="Data Engineer",
    )
    await make_user("anu@example.com", first_name="Anu", last_name="Priyadarshini", batch="2018", location="Delhi")
    db_session.add_all([
        Post(author_id=priya.id, content="Priya shares interview tips", post_approved=True),
        Event(title="Priya's data talk", description="Pune chapter", location="Pune"),
        Job(title="Data Engineer", company="Acme", location="Pune"),
    ])
    await db_session.commit()
    return priya


@pytest.fixture
async def dispatcher(database):
    async with create_search_client(get_settings(), transport=ASGITransport(app=app)) as client:
        yield SearchDispatcher(client, limit=5)


class TestDispatcherAgainstApi:
    async def test_all_collections(self, dispatcher, network) -> None:
        results = await dispatcher.search("priya")
        types = {r.type for r in results}
        assert types == {ResultType.POST, ResultType.ALUMNI, ResultType.EVENT}
        scores = [r.relevance for r in results]
        assert scores == sorted(scores, reverse=True)

    async def test_alumni_only(self, dispatcher, network) -> None:
        results = await dispatcher.search("priya", SearchFilters(type="alumni"))
        assert [r.title for r in results] == ["Priya Patel", "Anu Priyadarshini"]
        assert [r.relevance for r in results] == [60, 35]
        top = results[0]
        assert top.title == "Priya Patel"
        assert top.url == f"/profile/{network.id}"

    async def test_batch_filter_reaches_alumni(self, dispatcher, network) -> None:
        results = await dispatcher.search("priya", SearchFilters(type="alumni", batch="2018"))
        assert [r.title for r in results] == ["Anu Priyadarshini"]

    async def test_location_filter(self, dispatcher, network) -> None:
        results = await dispatcher.search("data", SearchFilters(location="Pune"))
        assert {r.type for r in results} == {ResultType.EVENT, ResultType.JOB}


class TestSessionAgainstApi:
    async def test_enter_opens_top_alumni_profile(self, dispatcher, network, history_file) -> None:
        navigated = []
        session = SearchSession(
            dispatcher,
            SearchHistory(history_file),
            navigate=navigated.append,
            settings=Settings(search_debounce_ms=10),
        )
        session.open()
        session.set_filters(type="alumni")
        session.set_query("priya")
        await session.wait_idle()
        assert session.results

        session.press_enter()
        assert navigated == [f"/profile/{network.id}"]
        assert session.history == ["priya"]
