"""temping environment health report utility.

Run via ``python -m temping.doctor`` to check the resolved configuration, the
default sandbox root, and whether a sandbox can actually be created there.
"""
from __future__ import annotations

import os
import sys
import tempfile
from typing import Any, Dict
from uuid import uuid4

from temping.config.config_loader import load_config
from temping.config.sandbox_config import get_default_root
from temping.errors import TempingError
from temping.sandbox import Temping


def _venv_active() -> bool:
    return (
        sys.prefix != getattr(sys, "base_prefix", sys.prefix)
        or sys.prefix != getattr(sys, "real_prefix", sys.prefix)
        or "VIRTUAL_ENV" in os.environ
    )


def _probe_sandbox(directory: str) -> Dict[str, Any]:
    sandbox = Temping(directory)
    result = {"path": sandbox.get_directory(), "write": False, "read": False, "cleanup": True}
    payload = "temping doctor"
    name = f"doctor_probe_{uuid4().hex}/probe.txt"
    try:
        sandbox.create(name, payload)
        result["write"] = True
        result["read"] = sandbox.get_contents(name) == payload
    except (TempingError, OSError) as exc:
        result["error"] = str(exc)
    finally:
        try:
            sandbox.reset()
            result["cleanup"] = not sandbox.exists()
        except OSError as exc:
            result["cleanup"] = False
            result["cleanup_error"] = str(exc)
    return result


def generate_report() -> Dict[str, Any]:
    config = load_config()
    default_root = get_default_root()
    probe_root = os.path.join(tempfile.gettempdir(), f"temping-doctor-{uuid4().hex}")

    return {
        "python": {
            "executable": sys.executable,
            "version": sys.version,
            "venv_active": _venv_active(),
        },
        "config": {
            "TEMPING_DIR": config["root"],
            "TEMPING_NAMESPACE": config["namespace"],
            "TEMPING_LOG_LEVEL": config["log_level"],
            "TEMPING_LOG_FILE": config["log_file"],
        },
        "default_root": {
            "path": default_root,
            "exists": os.path.isdir(default_root),
        },
        "probe": _probe_sandbox(probe_root),
    }


def main() -> None:
    report = generate_report()
    print("=== temping doctor ===")
    print("--- Python ---")
    print(f"Executable: {report['python']['executable']}")
    print(f"Version: {report['python']['version']}")
    print(f"Virtualenv active: {report['python']['venv_active']}")
    print("--- Config ---")
    for name, value in report["config"].items():
        print(f"{name}: {value}")
    print("--- Default root ---")
    print(f"Path: {report['default_root']['path']}")
    print(f"Exists: {report['default_root']['exists']}")
    print("--- Probe ---")
    probe = report["probe"]
    print(f"Sandbox: {probe['path']}")
    print(f"  Writable: {probe.get('write')}")
    print(f"  Readback OK: {probe.get('read')}")
    print(f"  Cleanup: {probe.get('cleanup')}")
    if probe.get("error"):
        print(f"  Error: {probe['error']}")
    if probe.get("cleanup_error"):
        print(f"  Cleanup error: {probe['cleanup_error']}")


if __name__ == "__main__":
    main()
