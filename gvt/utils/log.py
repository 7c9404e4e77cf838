"""Diagnostic output for gvt.

Debug lines go to stderr and only when GVT_DEBUG is set, so normal
command output on stdout stays clean.
"""

from __future__ import annotations

import sys
import traceback

from .env import is_debug_mode


def log_debug(message: str) -> None:
    """Log debug message to stderr.

    Only outputs if GVT_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[gvt] {message}", file=sys.stderr)


def log_error_detail(exc: BaseException) -> None:
    """Report the cause of a system failure on stderr.

    Prints the chained cause in one line; the full traceback is added in
    debug mode.
    """
    cause = exc.__cause__ or exc
    print(f"[gvt] {type(cause).__name__}: {cause}", file=sys.stderr)
    if is_debug_mode():
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
