"""Error taxonomy for asset-conf.

Library code raises these; only the CLI turns them into messages and exit codes.
"""
from __future__ import annotations


class AssetConfError(Exception):
    """Base class for every error raised by asset-conf."""


class UnknownAssetError(AssetConfError):
    """An explicitly requested symbol is not in the catalog."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Asset '{symbol}' not found in available assets")


class NoAssetsSelectedError(AssetConfError):
    def __init__(self, message: str = "No assets selected. Provide explicit assets and/or a random count > 0"):
        super().__init__(message)


class FetchError(AssetConfError):
    """Catalog retrieval failed (transport, HTTP status or malformed body)."""


class TokenNotSetError(AssetConfError):
    def __init__(self):
        super().__init__(
            "No authentication token set. Set token with: \n\n   asset-conf set-token <token>"
        )


class OutputPathError(AssetConfError):
    pass


class InvalidParameterError(AssetConfError, ValueError):
    pass


class InsufficientRandomPoolWarning(UserWarning):
    """More random assets were requested than remain after explicit selection."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} random assets but only {available} are available; using all of them"
        )


__all__ = [
    "AssetConfError",
    "UnknownAssetError",
    "NoAssetsSelectedError",
    "FetchError",
    "TokenNotSetError",
    "OutputPathError",
    "InvalidParameterError",
    "InsufficientRandomPoolWarning",
]
