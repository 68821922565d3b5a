from __future__ import annotations
import logging
import os

# Small logger so modules can do: from asset_conf.utils import get_logger
def get_logger(name: str = "asset_conf", level: str | None = None):
    lvl = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=getattr(logging, lvl, logging.WARNING),
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(getattr(logging, lvl, logging.WARNING))
    return logger


from asset_conf.utils.env_tools import (  # noqa: E402
    load_env_once,
    env_flag,
    is_demo_mode,
    get_config_dir,
    load_settings,
)

__all__ = [
    "get_logger",
    "load_env_once",
    "env_flag",
    "is_demo_mode",
    "get_config_dir",
    "load_settings",
]
