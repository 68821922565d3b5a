"""Catalog providers.

Anything with a ``fetch() -> list[str]`` method is a catalog provider; it
returns the full symbol list or raises FetchError. The core planner and
search never see the provider, only the list it returned.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol

from asset_conf.data_sources.demo import DEMO_ASSETS, DemoCatalogProvider
from asset_conf.data_sources.local import FileCatalogProvider, load_catalog_file
from asset_conf.data_sources.stork import StorkCatalogProvider, fetch_assets
from asset_conf.utils.env_tools import is_demo_mode, load_settings
from asset_conf.utils.token_store import require_token


class CatalogProvider(Protocol):
    def fetch(self) -> List[str]:
        ...


def get_catalog_provider(
    catalog_file: Optional[str | Path] = None,
    settings: Optional[dict] = None,
) -> CatalogProvider:
    """Pick a provider: explicit catalog file, then demo mode, then Stork (needs a token).

    Raises:
        TokenNotSetError: Stork was selected and no token is configured.
    """
    if catalog_file:
        return FileCatalogProvider(catalog_file)
    if is_demo_mode():
        return DemoCatalogProvider()
    settings = settings or load_settings()
    api = settings["api"]
    return StorkCatalogProvider(
        require_token(),
        base_url=api["base_url"],
        assets_path=api["assets_path"],
        timeout=api["timeout"],
    )


__all__ = [
    "CatalogProvider",
    "get_catalog_provider",
    "StorkCatalogProvider",
    "FileCatalogProvider",
    "DemoCatalogProvider",
    "DEMO_ASSETS",
    "fetch_assets",
    "load_catalog_file",
]
