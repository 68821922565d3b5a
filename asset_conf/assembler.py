"""Assemble the per-asset configuration artifact."""
from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping

from asset_conf.encoding import encode_asset_id
from asset_conf.errors import InvalidParameterError, NoAssetsSelectedError

DEFAULT_FALLBACK_PERIOD_SEC = 60
DEFAULT_PERCENT_CHANGE_THRESHOLD = 1.0


@dataclass(frozen=True)
class AssetConfigEntry:
    asset_id: str
    fallback_period_sec: int
    percent_change_threshold: float
    encoded_asset_id: str


@dataclass(frozen=True)
class ConfigArtifact:
    """Read-only mapping of asset_id -> AssetConfigEntry, keys in ascending order."""
    assets: Mapping[str, AssetConfigEntry]

    def __len__(self) -> int:
        return len(self.assets)

    def __iter__(self):
        return iter(self.assets)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form: {"assets": {asset_id: {field: value, ...}}}."""
        return {"assets": {k: asdict(v) for k, v in self.assets.items()}}


def _check_params(fallback_period_sec, percent_change_threshold) -> None:
    if isinstance(fallback_period_sec, bool) or not isinstance(fallback_period_sec, int):
        raise InvalidParameterError(
            f"Fallback period must be an integer number of seconds, got {fallback_period_sec!r}"
        )
    if fallback_period_sec <= 0:
        raise InvalidParameterError(f"Fallback period must be > 0, got {fallback_period_sec}")
    try:
        pct = float(percent_change_threshold)
    except (TypeError, ValueError):
        raise InvalidParameterError(
            f"Percent change threshold must be a number, got {percent_change_threshold!r}"
        ) from None
    if not math.isfinite(pct) or pct <= 0:
        raise InvalidParameterError(f"Percent change threshold must be > 0, got {percent_change_threshold}")


def assemble_config(
    selected: Iterable[str],
    fallback_period_sec: int = DEFAULT_FALLBACK_PERIOD_SEC,
    percent_change_threshold: float = DEFAULT_PERCENT_CHANGE_THRESHOLD,
) -> ConfigArtifact:
    """Build a ConfigArtifact for ``selected`` sharing the two scalar settings.

    Uniqueness of ``selected`` is the planner's job and is not re-checked here.

    Raises:
        InvalidParameterError: a scalar setting is not positive.
        NoAssetsSelectedError: ``selected`` is empty.
    """
    _check_params(fallback_period_sec, percent_change_threshold)
    selected = list(selected)
    if not selected:
        raise NoAssetsSelectedError()
    pct = float(percent_change_threshold)
    entries = {
        asset_id: AssetConfigEntry(
            asset_id=asset_id,
            fallback_period_sec=fallback_period_sec,
            percent_change_threshold=pct,
            encoded_asset_id=encode_asset_id(asset_id),
        )
        for asset_id in selected
    }
    ordered = {k: entries[k] for k in sorted(entries)}
    return ConfigArtifact(assets=MappingProxyType(ordered))


__all__ = [
    "DEFAULT_FALLBACK_PERIOD_SEC",
    "DEFAULT_PERCENT_CHANGE_THRESHOLD",
    "AssetConfigEntry",
    "ConfigArtifact",
    "assemble_config",
]
