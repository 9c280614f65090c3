"""
Configuration resolution: CLI flag > env var > config file > default.

Config file: ~/.textsign/config.json, or the path in TEXTSIGN_CONFIG.
    {"format": "ed25519", "key": "/path/to/key"}
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from textsign.const import TextSignFormat

logger = logging.getLogger(__name__)

ENV_CONFIG = "TEXTSIGN_CONFIG"
ENV_FORMAT = "TEXTSIGN_FORMAT"
ENV_KEY = "TEXTSIGN_KEY"

DEFAULT_FORMAT = TextSignFormat.BLAKE3


def config_path() -> Path:
    env = os.environ.get(ENV_CONFIG)
    if env:
        return Path(env)
    return Path.home() / ".textsign" / "config.json"


def load_config_file(path: Optional[Path] = None) -> dict:
    path = path or config_path()
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level must be an object", path)
        return {}
    return data


def _resolve(cli_val: Optional[str], env_key: str, config_key: str) -> Optional[str]:
    if cli_val is not None:
        return cli_val
    env = os.environ.get(env_key)
    if env:
        return env
    cfg = load_config_file().get(config_key)
    if cfg:
        return str(cfg)
    return None


def resolve_format(cli_val: Optional[str] = None) -> TextSignFormat:
    val = _resolve(cli_val, ENV_FORMAT, "format")
    if val is None:
        return DEFAULT_FORMAT
    return TextSignFormat.parse(val)


def resolve_key_path(cli_val: Optional[str] = None) -> Optional[Path]:
    val = _resolve(cli_val, ENV_KEY, "key")
    return Path(val).expanduser() if val else None
