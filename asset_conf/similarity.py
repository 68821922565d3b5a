"""Suggest catalog symbols for a query that did not match exactly.

Two phases:

1. Substring: every catalog entry containing the query (case-insensitive),
   in catalog order, up to the limit. When this finds anything, it is returned
   as-is and the fuzzy phase is skipped, even if fewer than ``limit`` entries
   were found.
2. Fuzzy: Jaro-Winkler similarity on uppercased strings plus additive boosts
   (prefix +0.3, else suffix +0.2, and +0.1 when the entry contains the query
   minus its last character, for queries of length >= 3). Stable sort by
   score, best first.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from rapidfuzz.distance import JaroWinkler

_log = logging.getLogger(__name__)

HARD_LIMIT = 10

PREFIX_BOOST = 0.3
SUFFIX_BOOST = 0.2
TRUNCATED_BOOST = 0.1


def similarity_score(query: str, candidate: str) -> float:
    """Fuzzy-phase score of ``candidate`` for ``query`` (may exceed 1.0 with boosts)."""
    q = query.upper()
    c = candidate.upper()
    score = JaroWinkler.similarity(q, c)
    if c.startswith(q):
        score += PREFIX_BOOST
    elif c.endswith(q):
        score += SUFFIX_BOOST
    if len(q) >= 3 and q[:-1] in c:
        score += TRUNCATED_BOOST
    return score


def suggest_assets(query: str, catalog: Sequence[str], limit: int = 5) -> List[str]:
    """Return up to ``min(limit, HARD_LIMIT)`` catalog symbols resembling ``query``.

    Args:
        query: The symbol the user asked for.
        catalog: Available symbols, in catalog order.
        limit: Requested number of suggestions.

    Returns:
        Suggestions, best match first. Empty when nothing resembles the query
        or the catalog is empty; this function never raises.
    """
    cap = min(limit, HARD_LIMIT)
    if cap <= 0 or not catalog:
        return []

    q = query.upper()
    substring_hits = [s for s in catalog if q in s.upper()][:cap]
    if substring_hits:
        _log.debug(f"suggest '{query}': {len(substring_hits)} substring matches")
        return substring_hits

    # sorted() is stable, so equal scores keep catalog order
    scored = sorted(
        ((similarity_score(query, s), s) for s in catalog),
        key=lambda pair: pair[0],
        reverse=True,
    )
    out = [s for _, s in scored[:cap]]
    _log.debug(f"suggest '{query}': fuzzy top {len(out)} -> {out}")
    return out


__all__ = ["HARD_LIMIT", "similarity_score", "suggest_assets"]
