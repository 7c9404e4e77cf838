"""File system utilities for gvt.

Provides atomic writes, file copies and tolerant deletes. These raise
`OSError` as-is; callers decide how to report it.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any


def atomic_write(file_path: Path | str, content: str | bytes, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content atomically using tempfile + rename pattern.

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode ('w' for text, 'wb' for binary)
        encoding: Text encoding, ignored for binary mode
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file lives in the target directory so os.replace stays on one filesystem
    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp"
    )

    try:
        if "b" in mode:
            with os.fdopen(fd, mode) as f:
                f.write(content)
        else:
            with os.fdopen(fd, mode, encoding=encoding) as f:
                f.write(content)
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def copy_file(src: Path | str, dst: Path | str) -> None:
    """Copy a file's bytes and metadata, overwriting dst."""
    shutil.copy2(src, dst)


def delete_if_exists(file_path: Path | str) -> bool:
    """Delete a file, treating a missing file as success.

    Returns:
        True if a file was removed
    """
    try:
        Path(file_path).unlink()
        return True
    except FileNotFoundError:
        return False


def safe_json_load(file_path: Path | str, default: Any = None) -> Any:
    """Safely load JSON file with fallback.

    Args:
        file_path: Path to JSON file
        default: Default value if file doesn't exist or is invalid

    Returns:
        Parsed JSON or default value
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError):
        return default if default is not None else {}
