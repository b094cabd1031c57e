"""Tests for the persisted recent-search history."""

import json

from alumni_api.search.history import SearchHistory, push_history


class TestPushHistory:
    def test_most_recent_first(self) -> None:
        assert push_history(["b", "a"], "c") == ["c", "b", "a"]

    def test_existing_entry_moves_to_front(self) -> None:
        assert push_history(["c", "b", "a"], "a") == ["a", "c", "b"]

    def test_dedupe_is_exact_match(self) -> None:
        assert push_history(["Priya"], "priya") == ["priya", "Priya"]

    def test_capped(self) -> None:
        entries = [f"q{i}" for i in range(10)]
        out = push_history(entries, "new")
        assert len(out) == 10
        assert out[0] == "new"
        assert "q9" not in out


class TestSearchHistory:
    def test_missing_file_loads_empty(self, history_file) -> None:
        assert SearchHistory(history_file).entries == []

    def test_add_persists_json_array(self, history_file) -> None:
        history = SearchHistory(history_file)
        history.add("priya")
        history.add("events")
        assert json.loads(history_file.read_text()) == ["events", "priya"]

    def test_survives_reload(self, history_file) -> None:
        SearchHistory(history_file).add("data science")
        assert SearchHistory(history_file).entries == ["data science"]

    def test_never_exceeds_cap_and_no_duplicates(self, history_file) -> None:
        history = SearchHistory(history_file, size=10)
        for i in range(25):
            history.add(f"query {i % 12}")
        assert len(history) == 10
        assert len(set(history.entries)) == 10
        assert history.entries[0] == "query 0"

    def test_blank_query_ignored(self, history_file) -> None:
        history = SearchHistory(history_file)
        history.add("   ")
        assert history.entries == []
        assert not history_file.exists()

    def test_clear_removes_file(self, history_file) -> None:
        history = SearchHistory(history_file)
        history.add("jobs")
        history.clear()
        assert history.entries == []
        assert not history_file.exists()
        history.clear()

    def test_corrupt_file_loads_empty(self, history_file) -> None:
        history_file.write_text("{not json")
        assert SearchHistory(history_file).entries == []

    def test_non_string_entries_dropped(self, history_file) -> None:
        history_file.write_text(json.dumps(["ok", 3, None, "fine"]))
        assert SearchHistory(history_file).entries == ["ok", "fine"]

    def test_unwritable_path_keeps_entries_in_memory(self, tmp_path, caplog) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        history = SearchHistory(blocker / "search_history.json")
        with caplog.at_level("WARNING", logger="alumni_api.search.history"):
            assert history.add("priya") == ["priya"]
        assert "Could not write search history" in caplog.text
