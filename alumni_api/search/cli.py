"""
Run one global search against a running Alumni API and print the ranked results.

  alumni-search "priya" --type alumni --batch 2020
  alumni-search --show-history

Uses SEARCH_API_BASE_URL (or --base-url) and records qualifying queries in the
local search history, the same way the interactive search surface does.
"""
import argparse
import asyncio
import logging
import sys

from alumni_api.core.config import Settings, get_settings
from alumni_api.search.dispatcher import SearchDispatcher, create_search_client
from alumni_api.search.history import SearchHistory
from alumni_api.search.navigation import navigation_target
from alumni_api.search.session import SearchSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="alumni-search", description="Search posts, alumni, events and jobs.")
    parser.add_argument("query", nargs="?", help="Search text (at least 2 characters)")
    parser.add_argument("--type", default="all", choices=["all", "post", "alumni", "event", "job"])
    parser.add_argument("--location", default=None)
    parser.add_argument("--batch", default=None)
    parser.add_argument("--base-url", default=None, help="API base URL (default: SEARCH_API_BASE_URL)")
    parser.add_argument("--history-file", default=None, help="Search history file (default: SEARCH_HISTORY_PATH)")
    parser.add_argument("--show-history", action="store_true", help="Print recent searches and exit")
    parser.add_argument("--clear-history", action="store_true", help="Forget recent searches and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


async def run_search(settings: Settings, history: SearchHistory, args: argparse.Namespace) -> int:
    async with create_search_client(settings) as client:
        dispatcher = SearchDispatcher(client, limit=settings.search_result_limit)
        session = SearchSession(dispatcher, history, settings=settings)
        session.open()
        session.set_filters(type=args.type, location=args.location, batch=args.batch)
        session.set_query(args.query)
        session.press_enter()
        await session.wait_idle()

        if not session.results:
            print("No results.")
            return 1
        for i, result in enumerate(session.results, start=1):
            print(f"{i:>2}. [{result.type.value}] {result.title}  ({result.relevance})")
            print(f"    {result.description}")
            print(f"    -> {navigation_target(result)}")
        return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level.upper())

    updates = {}
    if args.base_url:
        updates["search_api_base_url"] = args.base_url
    if args.history_file:
        updates["search_history_path"] = args.history_file
    if updates:
        settings = settings.model_copy(update=updates)

    history = SearchHistory(settings.search_history_file, size=settings.search_history_size)
    if args.clear_history:
        history.clear()
        print("Search history cleared.")
        return 0
    if args.show_history:
        for entry in history:
            print(entry)
        return 0

    query = args.query or ""
    if len(query.strip()) < settings.search_min_query_length:
        print(f"Query must be at least {settings.search_min_query_length} characters.", file=sys.stderr)
        return 2
    return asyncio.run(run_search(settings, history, args))


if __name__ == "__main__":
    sys.exit(main())
