"""Catalog snapshots read from disk (offline use, fixtures, pinned catalogs)."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from asset_conf.errors import FetchError

_log = logging.getLogger(__name__)


def load_catalog_file(path: str | Path) -> List[str]:
    """Read symbols from a JSON list, a JSON object with a ``data`` list,
    or a plain text file with one symbol per line (blank lines and ``#`` comments skipped).
    """
    p = Path(path)
    try:
        text = p.read_text()
    except OSError as e:
        raise FetchError(f"Cannot read catalog file {p}: {e}") from e

    if p.suffix.lower() == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise FetchError(f"Invalid JSON in catalog file {p}: {e}") from e
        if isinstance(payload, dict):
            payload = payload.get("data")
        if not isinstance(payload, list):
            raise FetchError(f"Catalog file {p} must hold a list of symbols")
        symbols = [s for s in payload if isinstance(s, str)]
    else:
        symbols = [
            line.strip() for line in text.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]
    _log.info(f"Loaded {len(symbols)} assets from {p}")
    return symbols


class FileCatalogProvider:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch(self) -> List[str]:
        return load_catalog_file(self.path)


__all__ = ["load_catalog_file", "FileCatalogProvider"]
