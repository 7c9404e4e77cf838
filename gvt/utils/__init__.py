"""Utility modules for gvt."""

from .fs import atomic_write, copy_file, delete_if_exists, safe_json_load
from .env import determine_project_root, get_global_gvt_dir, get_home_dir, is_debug_mode
from .log import log_debug, log_error_detail

__all__ = [
    "atomic_write",
    "copy_file",
    "delete_if_exists",
    "safe_json_load",
    "determine_project_root",
    "get_global_gvt_dir",
    "get_home_dir",
    "is_debug_mode",
    "log_debug",
    "log_error_detail",
]
