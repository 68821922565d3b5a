"""Fixed demo catalog for offline/demo environments (ASSET_CONF_DEMO=1).

Demo mode never touches the network or needs a token.
"""
from __future__ import annotations

from typing import List

DEMO_ASSETS: List[str] = [
    "BTCUSD",
    "ETHUSD",
    "SOLUSD",
    "AVAXUSD",
    "LINKUSD",
    "DOGEUSD",
    "ADAUSD",
    "DOTUSD",
    "MATICUSD",
    "ATOMUSD",
    "USDCUSD",
    "USDTUSD",
    "WBTCUSD",
    "STETHUSD",
    "EURUSD",
    "GBPUSD",
    "USDJPY",
    "XAUUSD",
]


class DemoCatalogProvider:
    def fetch(self) -> List[str]:
        return list(DEMO_ASSETS)


__all__ = ["DEMO_ASSETS", "DemoCatalogProvider"]
