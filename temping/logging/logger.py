"""Centralized logger configuration for temping."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from temping.config.config_loader import load_config


_LOGGER_NAME = "temping"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a configured logger instance.

    The logger is configured with a basic formatter. Subsequent calls reuse
    the same logger hierarchy so configuration is only applied once. The
    level and the optional log file come from ``TEMPING_LOG_LEVEL`` and
    ``TEMPING_LOG_FILE``.
    """

    logger_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        config = load_config()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if config["log_file"]:
            try:
                file_handler = logging.FileHandler(Path(config["log_file"]), encoding="utf-8")
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError:
                # Fall back to stderr-only logging if the file handler fails to initialize.
                pass

        logger.setLevel(config["log_level"])
        logger.propagate = False
    return logger
