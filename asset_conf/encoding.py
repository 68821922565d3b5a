"""Encoded asset identifiers.

An asset's encoded id is the Keccak-256 digest of the raw UTF-8 bytes of its
symbol, rendered as ``0x`` + 64 lowercase hex characters. This is the
original Keccak padding used on-chain, not NIST SHA3-256 (``hashlib.sha3_256``
gives different output).
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from Crypto.Hash import keccak


def encode_asset_id(symbol: str) -> str:
    """Return the ``0x``-prefixed Keccak-256 hex digest of ``symbol``.

    The symbol is hashed exactly as given (no trimming or case folding).

    Example:
        >>> encode_asset_id("BTCUSD")
        '0x7404e3d104ea7841c3d9e6fd20adfe99b4ad586bc08d8f3bd3afef894cf184de'
    """
    # fresh hash object per call; keccak objects are not reusable after digest()
    h = keccak.new(digest_bits=256)
    h.update(symbol.encode("utf-8"))
    return "0x" + h.hexdigest()


def encode_many(symbols: Iterable[str]) -> List[Tuple[str, str]]:
    """Encode each symbol, keeping input order: [(symbol, encoded_id), ...]."""
    return [(s, encode_asset_id(s)) for s in symbols]


__all__ = ["encode_asset_id", "encode_many"]
