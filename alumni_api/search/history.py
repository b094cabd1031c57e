"""Recent-search history persisted in a client-local JSON file."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 10


def push_history(entries: list[str], query: str, size: int = DEFAULT_HISTORY_SIZE) -> list[str]:
    """Return a new list with ``query`` first, exact duplicates removed, capped at ``size``."""
    return [query, *(q for q in entries if q != query)][:size]


class SearchHistory:
    """Most-recent-first list of past queries, written through to ``path`` on every change."""

    def __init__(self, path: Path | str, size: int = DEFAULT_HISTORY_SIZE):
        self.path = Path(path)
        self.size = size
        self._entries = self._load()

    def _load(self) -> list[str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning("Could not read search history %s: %s", self.path, e)
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt search history at %s", self.path)
            return []
        if not isinstance(data, list):
            return []
        return [q for q in data if isinstance(q, str)][: self.size]

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._entries), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write search history %s: %s", self.path, e)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def add(self, query: str) -> list[str]:
        if not query.strip():
            return self.entries
        self._entries = push_history(self._entries, query, self.size)
        self._save()
        return self.entries

    def clear(self) -> None:
        self._entries = []
        self.path.unlink(missing_ok=True)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))
