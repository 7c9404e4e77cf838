"""Snapshot storage for gvt.

Owns the on-disk layout under `<project>/.gvt/`: one directory per version
(`0`, `1`, ...) holding full copies of the tracked files plus a commit
message record, and two pointer files naming the latest and the active
version. Versions are append-only; nothing here deletes or rewrites one.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..errors import AlreadyInitializedError, CorruptStateError, IOFaultError, VersionAlreadyExistsError
from ..utils.fs import atomic_write, copy_file
from ..utils.log import log_debug


_POINTER_RE = re.compile(r"[0-9]+")


class SnapshotStore:
    """Manages version directories and the latest/active pointers."""

    METADATA_DIR = ".gvt"
    MESSAGE_NAME = ".gvt_commit_msg"
    LATEST_NAME = ".gvt_latest_ver"
    ACTIVE_NAME = ".gvt_active_ver"
    INITIAL_MESSAGE = "GVT initialized."

    def __init__(self, project_root: Path, encoding: str = "utf-8"):
        """Initialize snapshot store.

        Args:
            project_root: Project root directory holding the working files
            encoding: Encoding for message and pointer files
        """
        self.project_root = Path(project_root)
        self.metadata_dir = self.project_root / self.METADATA_DIR
        self.encoding = encoding

    def is_initialized(self) -> bool:
        return self.metadata_dir.is_dir()

    def initialize(self) -> None:
        """Create the metadata directory with version 0 and both pointers at 0.

        Raises:
            AlreadyInitializedError: If the metadata directory exists
            IOFaultError: If the layout cannot be written
        """
        if self.is_initialized():
            raise AlreadyInitializedError()

        try:
            self.metadata_dir.mkdir()
            self.create_version_dir(0)
            self.write_message(0, self.INITIAL_MESSAGE)
            self.write_latest(0)
            self.write_active(0)
        except (OSError, UnicodeError) as e:
            raise IOFaultError("init", "Underlying system problem. See ERR for details.") from e

        log_debug(f"Initialized repository at {self.metadata_dir}")

    def version_path(self, version: int) -> Path:
        return self.metadata_dir / str(version)

    def file_path(self, version: int, file_name: str) -> Path:
        return self.version_path(version) / file_name

    def has_file(self, version: int, file_name: str) -> bool:
        return self.file_path(version, file_name).exists()

    def create_version_dir(self, version: int, base: int | None = None) -> Path:
        """Create an empty version directory, optionally seeded from a base.

        Args:
            version: Id of the new version
            base: Version whose tracked files are copied into the new one

        Returns:
            Path to the new version directory

        Raises:
            VersionAlreadyExistsError: If the directory already exists
            OSError: If the directory or a copy cannot be created
        """
        new_dir = self.version_path(version)
        if new_dir.exists():
            raise VersionAlreadyExistsError(version)

        new_dir.mkdir()
        if base is not None:
            for name in self.list_files(base):
                copy_file(self.file_path(base, name), new_dir / name)
        log_debug(f"Created version directory {version} (base: {base})")
        return new_dir

    def list_files(self, version: int) -> list[str]:
        """Names of the tracked files stored in a version, sorted.

        The commit message record is not a tracked file and is left out.
        """
        names = [
            entry.name
            for entry in self.version_path(version).iterdir()
            if entry.is_file() and entry.name != self.MESSAGE_NAME
        ]
        return sorted(names)

    def version_ids(self) -> list[int]:
        """Ids of the version directories on disk, ascending."""
        if not self.is_initialized():
            return []
        ids = [
            int(entry.name)
            for entry in self.metadata_dir.iterdir()
            if entry.is_dir() and _POINTER_RE.fullmatch(entry.name)
        ]
        return sorted(ids)

    def read_message(self, version: int) -> str:
        path = self.version_path(version) / self.MESSAGE_NAME
        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeError as e:
            raise CorruptStateError(f"Commit message of version {version} is not valid {self.encoding}: {e}") from e

    def write_message(self, version: int, message: str) -> None:
        (self.version_path(version) / self.MESSAGE_NAME).write_text(message, encoding=self.encoding)

    def read_latest(self) -> int:
        return self._read_pointer(self.LATEST_NAME)

    def read_active(self) -> int:
        return self._read_pointer(self.ACTIVE_NAME)

    def write_latest(self, version: int) -> None:
        self._write_pointer(self.LATEST_NAME, version)

    def write_active(self, version: int) -> None:
        self._write_pointer(self.ACTIVE_NAME, version)

    def _read_pointer(self, name: str) -> int:
        path = self.metadata_dir / name
        try:
            raw = path.read_text(encoding=self.encoding).strip()
        except (OSError, UnicodeError) as e:
            raise CorruptStateError(f"Cannot read version pointer {name}: {e}") from e

        if not _POINTER_RE.fullmatch(raw):
            raise CorruptStateError(f"Version pointer {name} holds an invalid value: {raw!r}")
        return int(raw)

    def _write_pointer(self, name: str, version: int) -> None:
        if version < 0:
            raise ValueError(f"version must be >= 0, got {version}")
        atomic_write(self.metadata_dir / name, str(version), encoding=self.encoding)
        log_debug(f"Pointer {name} -> {version}")
