from __future__ import annotations
import logging
from typing import List

import requests

from asset_conf.errors import FetchError

logger = logging.getLogger(__name__)

STORK_BASE = "https://rest.jp.stork-oracle.network"
ASSETS_PATH = "/v1/prices/assets"


def _parse_assets(payload) -> List[str]:
    """Pull the symbol list out of ``{"data": [...]}``; non-string items are dropped."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, list):
        raise FetchError("Invalid response format from server")
    assets = [a for a in data if isinstance(a, str)]
    if len(assets) != len(data):
        logger.warning(f"Dropped {len(data) - len(assets)} non-string entries from asset list")
    return assets


def fetch_assets(
    token: str,
    base_url: str | None = None,
    assets_path: str = ASSETS_PATH,
    timeout: float = 30,
) -> List[str]:
    """
    Fetch the list of available asset symbols from the Stork REST API.

    A single request is made; failures raise FetchError and are never retried here.
    """
    url = (base_url or STORK_BASE).rstrip("/") + assets_path
    headers = {"Authorization": f"Basic {token}"}
    logger.info(f"Stork request: GET {url}")
    try:
        r = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Error making request: {e}") from e

    logger.info(f"Stork response: HTTP {r.status_code}")
    if not 200 <= r.status_code < 300:
        raise FetchError(f"Server returned status {r.status_code}")
    try:
        payload = r.json()
    except ValueError as e:
        raise FetchError("Invalid response format from server") from e

    assets = _parse_assets(payload)
    logger.info(f"Stork SUCCESS: {len(assets)} assets")
    return assets


class StorkCatalogProvider:
    """CatalogProvider backed by the Stork REST API."""

    def __init__(self, token: str, base_url: str | None = None,
                 assets_path: str = ASSETS_PATH, timeout: float = 30):
        self.token = token
        self.base_url = base_url or STORK_BASE
        self.assets_path = assets_path
        self.timeout = timeout

    def fetch(self) -> List[str]:
        return fetch_assets(self.token, base_url=self.base_url,
                            assets_path=self.assets_path, timeout=self.timeout)


__all__ = ["STORK_BASE", "ASSETS_PATH", "fetch_assets", "StorkCatalogProvider"]
