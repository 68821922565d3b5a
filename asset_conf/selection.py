"""Selection planning: explicit assets first, then random fill.

The planner only works on an already-fetched catalog; it never touches the
network or the token store.
"""
from __future__ import annotations

import logging
import random
import warnings
from typing import List, Optional, Sequence

from asset_conf.errors import (
    InsufficientRandomPoolWarning,
    NoAssetsSelectedError,
    UnknownAssetError,
)

_log = logging.getLogger(__name__)


def _take(pool: List[str], symbol: str) -> Optional[str]:
    """Remove ``symbol`` from ``pool`` and return the catalog's spelling of it.

    Exact matches win; otherwise the first case-insensitive match is taken.
    Returns None when the symbol is not (or no longer) in the pool.
    """
    if symbol in pool:
        pool.remove(symbol)
        return symbol
    wanted = symbol.upper()
    for i, candidate in enumerate(pool):
        if candidate.upper() == wanted:
            return pool.pop(i)
    return None


def plan_selection(
    catalog: Sequence[str],
    explicit: Optional[Sequence[str]] = None,
    random_count: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Build the ordered, duplicate-free list of assets to configure.

    Args:
        catalog: Available symbols for this invocation.
        explicit: Symbols requested by name, validated in order. The first
            unknown symbol aborts the whole plan. Requesting the same symbol
            twice fails on the second occurrence, since the first one already
            consumed it.
        random_count: How many additional symbols to draw uniformly at random
            from what is left. ``None`` or 0 means no random fill.
        rng: Source of randomness; a fresh ``random.Random()`` when omitted.

    Returns:
        Explicit symbols in request order followed by the random draw.

    Raises:
        UnknownAssetError: an explicit symbol is not available.
        NoAssetsSelectedError: nothing was selected.

    Warns:
        InsufficientRandomPoolWarning: random_count exceeds what is left; all
            remaining symbols are used instead.
    """
    # catalog order kept, repeated entries collapsed
    pool = list(dict.fromkeys(catalog))
    selected: List[str] = []

    for symbol in explicit or []:
        found = _take(pool, symbol)
        if found is None:
            raise UnknownAssetError(symbol)
        selected.append(found)

    if random_count and random_count > 0:
        if random_count > len(pool):
            warning = InsufficientRandomPoolWarning(random_count, len(pool))
            _log.warning(str(warning))
            warnings.warn(warning, stacklevel=2)
            selected.extend(pool)
        else:
            rng = rng or random.Random()
            selected.extend(rng.sample(pool, random_count))

    if not selected:
        raise NoAssetsSelectedError()

    _log.info(
        f"Selected {len(selected)} assets ({len(explicit or [])} explicit, "
        f"{len(selected) - len(explicit or [])} random)"
    )
    return selected


def parse_asset_list(raw: Optional[str]) -> List[str]:
    """Split a comma-separated asset list, trimming whitespace and dropping blanks."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


__all__ = ["plan_selection", "parse_asset_list"]
