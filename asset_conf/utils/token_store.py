"""Authentication token persistence.

The token lives in ``<config dir>/config.json`` as ``{"auth_token": "..."}``.
ASSET_CONF_AUTH_TOKEN (environment or .env) takes precedence over the file.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from asset_conf.errors import TokenNotSetError
from asset_conf.utils.env_tools import get_config_dir, load_env_once

_log = logging.getLogger(__name__)

TOKEN_ENV_VAR = "ASSET_CONF_AUTH_TOKEN"


def get_auth_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_auth_config() -> dict:
    path = get_auth_config_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        _log.warning(f"Ignoring unreadable auth config {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def save_auth_config(cfg: dict) -> Path:
    path = get_auth_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2))
    _log.debug(f"Wrote auth config to {path}")
    return path


def set_token(token: str) -> Path:
    cfg = load_auth_config()
    cfg["auth_token"] = token
    return save_auth_config(cfg)


def get_token() -> str | None:
    """
    Layered retrieval of the auth token from:
    - os.environ (after loading .env) -> ASSET_CONF_AUTH_TOKEN
    - config.json -> auth_token
    Returns None if not found.
    """
    load_env_once()
    token = os.getenv(TOKEN_ENV_VAR)
    if token:
        return token
    return load_auth_config().get("auth_token") or None


def require_token() -> str:
    token = get_token()
    if not token:
        raise TokenNotSetError()
    return token


__all__ = [
    "TOKEN_ENV_VAR",
    "get_auth_config_path",
    "load_auth_config",
    "save_auth_config",
    "set_token",
    "get_token",
    "require_token",
]
