"""Environment utilities for gvt."""

from __future__ import annotations

import os
from pathlib import Path


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.

    Returns:
        True if GVT_DEBUG is set to a truthy value
    """
    val = os.environ.get("GVT_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def get_home_dir() -> Path:
    """Get user home directory."""
    return Path.home()


def get_global_gvt_dir() -> Path:
    """Get global gvt directory (~/.gvt).

    Returns:
        Path to global gvt config directory
    """
    return get_home_dir() / ".gvt"


def determine_project_root() -> Path:
    """Project root from GVT_PROJECT_ROOT, else the current directory."""
    val = os.environ.get("GVT_PROJECT_ROOT")
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser().absolute()
    return Path.cwd().absolute()
