from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional

FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Installed package version, or the source tree's version when not installed."""
    try:
        return importlib.metadata.version("editr")
    except importlib.metadata.PackageNotFoundError:
        return FALLBACK_VERSION


def _git_commit() -> Optional[str]:
    here = Path(__file__).resolve().parent
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=str(here),
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def get_version_string() -> str:
    """Version plus the git commit when running from a checkout."""
    commit = _git_commit()
    version = get_version()
    return f"editr {version} ({commit})" if commit else f"editr {version}"
