from __future__ import annotations

import os
import tempfile

from temping.config.config_loader import load_config
from temping.paths import ensure_trailing_separator


def get_default_root() -> str:
    """
    Root used when a sandbox is built without an explicit directory.
    TEMPING_DIR wins; otherwise the OS temp dir plus the namespace segment.
    Always absolute and ending with exactly one separator.
    """
    config = load_config()
    if config["root"]:
        return ensure_trailing_separator(os.path.abspath(os.path.expanduser(config["root"])))
    base = ensure_trailing_separator(tempfile.gettempdir())
    return ensure_trailing_separator(base + config["namespace"].strip("/\\"))
