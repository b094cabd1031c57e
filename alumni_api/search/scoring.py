"""Relevance scoring for global search results."""

EXACT_MATCH_SCORE = 100
PREFIX_MATCH_SCORE = 50
SUBSTRING_MATCH_SCORE = 25
TOKEN_MATCH_SCORE = 10


def score(query: str, text: str) -> int:
    """Heuristic relevance of ``text`` for ``query``, used only for ordering.

    Case-insensitive. The whole-query tier is exclusive (exact 100, else prefix
    50, else substring 25); on top of it every whitespace-delimited query token
    found anywhere in the text adds 10.
    """
    q = (query or "").lower()
    t = (text or "").lower()
    total = 0

    if t == q:
        total += EXACT_MATCH_SCORE
    elif t.startswith(q):
        total += PREFIX_MATCH_SCORE
    elif q in t:
        total += SUBSTRING_MATCH_SCORE

    for token in q.split():
        if token in t:
            total += TOKEN_MATCH_SCORE
    return total
