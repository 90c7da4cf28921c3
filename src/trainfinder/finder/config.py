from __future__ import annotations

import os
from pathlib import Path


def _get_env(name: str, default: str) -> str:
    return os.getenv(name, default)


def data_path() -> Path:
    return Path(_get_env("TRAINFINDER_DATA_PATH", "data.json"))


def log_level() -> str:
    return _get_env("TRAINFINDER_LOG_LEVEL", "WARNING").upper()
