"""Configuration loader."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict

DEFAULT_NAMESPACE = "py-temping/"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(raw: str | None) -> int:
    if not raw:
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown TEMPING_LOG_LEVEL: {raw!r}")
    return level


def load_config() -> Dict[str, Any]:
    return {
        "namespace": os.environ.get("TEMPING_NAMESPACE") or DEFAULT_NAMESPACE,
        "root": os.environ.get("TEMPING_DIR") or None,
        "log_level": _log_level(os.environ.get("TEMPING_LOG_LEVEL")),
        "log_file": os.environ.get("TEMPING_LOG_FILE") or None,
    }
