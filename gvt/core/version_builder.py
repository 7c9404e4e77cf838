"""Version construction for gvt.

Derives version N+1 from the latest version N by copying N's files into a
new directory and applying one change: add a file, replace it, or drop it.
Writes happen in a fixed order (files, message, latest, active) so a
pointer never names a version that is not fully on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal

from ..config.types import MessageConfig
from ..errors import IOFaultError, WorkingFileNotFoundError
from ..utils.fs import copy_file
from ..utils.log import log_debug
from .snapshot_store import SnapshotStore


Operation = Literal["add", "detach", "commit"]

_IO_FAILURE_MESSAGES: dict[str, str] = {
    "add": "File cannot be added. See ERR for details. File: {file}",
    "detach": "File cannot be detached, see ERR for details. File: {file}",
    "commit": "File cannot be committed, see ERR for details. File: {file}",
}


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a mutating command."""
    operation: Operation
    file_name: str
    created: bool
    version: int
    message: str = ""


class VersionBuilder:
    """Creates new versions from the latest one."""

    def __init__(self, store: SnapshotStore, messages: MessageConfig | None = None):
        self.store = store
        self.messages = messages or MessageConfig()

    @property
    def project_root(self) -> Path:
        return self.store.project_root

    def add(self, file_name: str, message: str | None = None) -> BuildResult:
        """Start tracking a working-tree file.

        A file already present in the latest version is left alone and no
        version is created.

        Raises:
            WorkingFileNotFoundError: If the file is not in the working tree
            IOFaultError: If the new version cannot be written
        """
        source = self._working_file("add", file_name)
        if not source.exists():
            raise WorkingFileNotFoundError(file_name)

        latest = self.store.read_latest()
        if self.store.has_file(latest, file_name):
            log_debug(f"add: {file_name} already tracked in version {latest}")
            return BuildResult("add", file_name, created=False, version=latest)

        return self._derive("add", file_name, latest, message, lambda new_dir: copy_file(source, new_dir / file_name))

    def detach(self, file_name: str, message: str | None = None) -> BuildResult:
        """Stop tracking a file. The working-tree copy is not touched.

        Raises:
            IOFaultError: If the new version cannot be written
        """
        latest = self.store.read_latest()
        if not _is_trackable_name(file_name) or not self.store.has_file(latest, file_name):
            log_debug(f"detach: {file_name} not tracked in version {latest}")
            return BuildResult("detach", file_name, created=False, version=latest)

        return self._derive("detach", file_name, latest, message, lambda new_dir: (new_dir / file_name).unlink())

    def commit(self, file_name: str, message: str | None = None) -> BuildResult:
        """Record the working-tree content of an already tracked file.

        Raises:
            WorkingFileNotFoundError: If the file is not in the working tree
            IOFaultError: If the new version cannot be written
        """
        source = self._working_file("commit", file_name)
        if not source.exists():
            raise WorkingFileNotFoundError(file_name)

        latest = self.store.read_latest()
        if not self.store.has_file(latest, file_name):
            log_debug(f"commit: {file_name} not tracked in version {latest}")
            return BuildResult("commit", file_name, created=False, version=latest)

        return self._derive("commit", file_name, latest, message, lambda new_dir: copy_file(source, new_dir / file_name))

    def _derive(
        self,
        operation: Operation,
        file_name: str,
        base: int,
        message: str | None,
        mutate: Callable[[Path], object],
    ) -> BuildResult:
        new_version = base + 1
        commit_message = message if message is not None else self.messages.render(operation, file_name)
        failure = _IO_FAILURE_MESSAGES[operation].format(file=file_name)

        # Nothing is written unless the message can be stored in the configured encoding
        try:
            commit_message.encode(self.store.encoding)
        except UnicodeError as e:
            raise IOFaultError(operation, failure) from e

        try:
            new_dir = self.store.create_version_dir(new_version, base=base)
            mutate(new_dir)
            self.store.write_message(new_version, commit_message)
            self.store.write_latest(new_version)
            self.store.write_active(new_version)
        except (OSError, UnicodeError) as e:
            raise IOFaultError(operation, failure) from e

        log_debug(f"{operation}: created version {new_version} from {base}")
        return BuildResult(operation, file_name, created=True, version=new_version, message=commit_message)

    def _working_file(self, operation: Operation, file_name: str) -> Path:
        """Resolve a tracked name to its working-tree path.

        Only plain names directly in the project root can be tracked; the
        metadata directory and the message record name are reserved.
        """
        if not _is_trackable_name(file_name):
            raise IOFaultError(
                operation, _IO_FAILURE_MESSAGES[operation].format(file=file_name)
            ) from ValueError(f"Unsupported file name: {file_name!r}")
        return self.project_root / file_name


def _is_trackable_name(file_name: str) -> bool:
    reserved = {"", ".", "..", SnapshotStore.METADATA_DIR, SnapshotStore.MESSAGE_NAME}
    return file_name not in reserved and Path(file_name).name == file_name and "\\" not in file_name
