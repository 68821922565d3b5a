from importlib.metadata import version, PackageNotFoundError
try:
    __version__ = version("asset-conf")
except PackageNotFoundError:
    __version__ = "0.1.0"

from asset_conf.encoding import encode_asset_id, encode_many
from asset_conf.similarity import HARD_LIMIT, similarity_score, suggest_assets
from asset_conf.selection import plan_selection, parse_asset_list
from asset_conf.assembler import AssetConfigEntry, ConfigArtifact, assemble_config
from asset_conf.errors import (
    AssetConfError,
    UnknownAssetError,
    NoAssetsSelectedError,
    FetchError,
    TokenNotSetError,
    OutputPathError,
    InvalidParameterError,
    InsufficientRandomPoolWarning,
)

__all__ = [
    "encode_asset_id", "encode_many",
    "HARD_LIMIT", "similarity_score", "suggest_assets",
    "plan_selection", "parse_asset_list",
    "AssetConfigEntry", "ConfigArtifact", "assemble_config",
    "AssetConfError", "UnknownAssetError", "NoAssetsSelectedError", "FetchError",
    "TokenNotSetError", "OutputPathError", "InvalidParameterError",
    "InsufficientRandomPoolWarning",
]
