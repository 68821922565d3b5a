from dotenv import dotenv_values
import copy
import logging
import os
from pathlib import Path

import yaml

_log = logging.getLogger(__name__)


def load_env_once(dotenv_path: str | None = None):
    """
    Load .env without relying on find_dotenv() to avoid assertion errors in -c / REPL contexts.
    Existing environment variables always win over .env values.
    """
    dp = dotenv_path or ".env"
    if not os.environ.get("_ASSET_CONF_ENV_LOADED", ""):
        if Path(dp).exists():
            env = dotenv_values(dp)
            for k, v in env.items():
                if v is not None and k not in os.environ:
                    os.environ[k] = str(v)
        os.environ["_ASSET_CONF_ENV_LOADED"] = "1"


def _truthy(value, default: bool = False) -> bool:
    if value is None:
        return bool(default)
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool | str = False) -> bool:
    """Return boolean interpretation of an environment flag (loads .env once)."""
    load_env_once()
    val = os.getenv(name)
    if val is None:
        return _truthy(default, default=False)
    return _truthy(val, default=False)


def is_demo_mode() -> bool:
    """True when ASSET_CONF_DEMO is truthy (1/true/yes)."""
    return env_flag("ASSET_CONF_DEMO", False)


def get_config_dir() -> Path:
    """Directory holding config.json (token) and settings.yaml.

    ASSET_CONF_HOME wins, then $XDG_CONFIG_HOME/asset_conf, then ~/.config/asset_conf.
    """
    load_env_once()
    home = os.getenv("ASSET_CONF_HOME")
    if home:
        return Path(home).expanduser()
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "asset_conf"


# === Settings =================================================================
_DEFAULT_SETTINGS = {
    "api": {
        "base_url": "https://rest.jp.stork-oracle.network",
        "assets_path": "/v1/prices/assets",
        "timeout": 30,
    },
    "generate": {
        "fallback_period_sec": 60,
        "percent_change_threshold": 1.0,
    },
    "search": {"limit": 5},
}


def _coerce(value, kind, default, name: str):
    """Convert a numeric setting; fall back to ``default`` (with a warning) when it is not a positive number."""
    try:
        if isinstance(value, bool):
            raise ValueError("booleans are not numbers")
        out = kind(value)
    except (TypeError, ValueError):
        _log.warning(f"Invalid value for {name}: {value!r}; using {default}")
        return default
    if not out > 0 or out == float("inf"):
        _log.warning(f"Invalid value for {name}: {value!r} must be > 0; using {default}")
        return default
    return out


def load_settings(config_path: str | Path | None = None) -> dict:
    """Load settings.yaml safely with sane defaults if the file or keys are missing.

    Unreadable files, non-mapping sections and values of the wrong type are
    logged and replaced by the defaults; this never raises.
    """
    p = Path(config_path) if config_path else get_config_dir() / "settings.yaml"
    cfg = {}
    if p.exists():
        try:
            with p.open("r") as f:
                cfg = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            _log.warning(f"Ignoring unreadable settings file {p}: {e}")
            cfg = {}
        if not isinstance(cfg, dict):
            _log.warning(f"Ignoring settings file {p}: top level must be a mapping")
            cfg = {}
    # backfill minimal keys if cfg is partial
    for section, defaults in _DEFAULT_SETTINGS.items():
        if not isinstance(cfg.get(section), dict):
            if cfg.get(section) is not None:
                _log.warning(f"Ignoring settings section '{section}': must be a mapping")
            cfg[section] = {}
        for k, v in defaults.items():
            cfg[section].setdefault(k, copy.deepcopy(v))
            # numeric settings must convert to the default's type
            if isinstance(v, (int, float)) and not isinstance(v, bool):
                cfg[section][k] = _coerce(cfg[section][k], type(v), v, f"{section}.{k}")
    # environment overrides
    if os.getenv("ASSET_CONF_API_URL"):
        cfg["api"]["base_url"] = os.environ["ASSET_CONF_API_URL"]
    if os.getenv("ASSET_CONF_TIMEOUT"):
        cfg["api"]["timeout"] = _coerce(
            os.environ["ASSET_CONF_TIMEOUT"], float, cfg["api"]["timeout"], "ASSET_CONF_TIMEOUT"
        )
    return cfg
