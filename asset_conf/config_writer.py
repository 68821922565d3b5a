"""Write a ConfigArtifact to a YAML file."""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from asset_conf.assembler import ConfigArtifact
from asset_conf.errors import OutputPathError

_log = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


def validate_output_path(path: str | Path) -> Path:
    """Check the output path before any network work is done.

    Raises:
        OutputPathError: wrong extension or missing parent directory.
    """
    p = Path(path)
    if not str(p).lower().endswith(_YAML_SUFFIXES):
        raise OutputPathError("Output file must have .yaml or .yml extension")
    if not p.parent.exists():
        raise OutputPathError("Output directory does not exist")
    return p


def dump_config(artifact: ConfigArtifact) -> str:
    # sort_keys=False: the artifact is already ordered and entry fields keep declaration order
    return yaml.safe_dump(artifact.to_dict(), sort_keys=False, default_flow_style=False)


def write_config(artifact: ConfigArtifact, path: str | Path) -> Path:
    p = validate_output_path(path)
    try:
        p.write_text(dump_config(artifact))
    except OSError as e:
        raise OutputPathError(f"Error writing file: {e}") from e
    _log.info(f"Wrote {len(artifact)} assets to {p}")
    return p


__all__ = ["validate_output_path", "dump_config", "write_config"]
