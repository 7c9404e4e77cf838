"""gvt controller - main orchestrator.

One method per command. Each checks that the repository exists, validates
its arguments before touching anything, runs the matching component and
returns the text to show the user. Failures are raised as `GvtError`s.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import ConfigLoader, GvtConfig
from ..errors import MissingArgumentError, NotInitializedError
from .checkout import CheckoutEngine
from .history import HistoryWalker, VersionInspector, format_history
from .snapshot_store import SnapshotStore
from .version_builder import BuildResult, VersionBuilder


_NOOP_MESSAGES: dict[str, str] = {
    "add": "File already added. File: {file}",
    "detach": "File is not added to gvt. File: {file}",
    "commit": "File is not added to gvt. File: {file}",
}

_SUCCESS_MESSAGES: dict[str, str] = {
    "add": "File added successfully. File: {file}",
    "detach": "File detached successfully. File: {file}",
    "commit": "File committed successfully. File: {file}",
}


@dataclass
class CommandResult:
    """Text to report for a successful command."""
    message: str
    version: int | None = None
    created: bool = False


@dataclass
class GvtStatus:
    """Pointers and tracked files of a repository."""
    latest: int
    active: int
    tracked_files: list[str] = field(default_factory=list)

    def format(self) -> str:
        files = ", ".join(self.tracked_files) if self.tracked_files else "(none)"
        return f"Latest version: {self.latest}\nActive version: {self.active}\nTracked files: {files}"


class GvtController:
    """Main controller for gvt operations."""

    def __init__(self, project_root: Path | str | None = None):
        """Initialize controller.

        Args:
            project_root: Project root directory (defaults to cwd)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self._config_loader = ConfigLoader(
            project_root=self.project_root,
            metadata_dir_name=SnapshotStore.METADATA_DIR,
        )
        self._store: SnapshotStore | None = None

    @property
    def config(self) -> GvtConfig:
        """Get current configuration."""
        return self._config_loader.config

    @property
    def store(self) -> SnapshotStore:
        """Get snapshot store (lazy init)."""
        if self._store is None:
            self._store = SnapshotStore(self.project_root, encoding=self.config.encoding)
        return self._store

    def is_initialized(self) -> bool:
        return self.store.is_initialized()

    def ensure_initialized(self) -> None:
        if not self.is_initialized():
            raise NotInitializedError()

    def init(self) -> CommandResult:
        """Create the repository with version 0."""
        self.store.initialize()
        return CommandResult("Current directory initialized successfully.", version=0, created=True)

    def add(self, file_name: str | None, message: str | None = None) -> CommandResult:
        self.ensure_initialized()
        if not file_name:
            raise MissingArgumentError("add")
        return self._report(self._builder().add(file_name, message))

    def detach(self, file_name: str | None, message: str | None = None) -> CommandResult:
        self.ensure_initialized()
        if not file_name:
            raise MissingArgumentError("detach")
        return self._report(self._builder().detach(file_name, message))

    def commit(self, file_name: str | None, message: str | None = None) -> CommandResult:
        self.ensure_initialized()
        if not file_name:
            raise MissingArgumentError("commit")
        return self._report(self._builder().commit(file_name, message))

    def checkout(self, version: int) -> CommandResult:
        self.ensure_initialized()
        result = CheckoutEngine(self.store).checkout(version)
        return CommandResult(f"Checkout successful for version: {result.version}", version=result.version)

    def history(self, limit: int | None = None) -> CommandResult:
        self.ensure_initialized()
        return CommandResult(format_history(HistoryWalker(self.store).walk(limit)))

    def version(self, version: int | None = None) -> CommandResult:
        self.ensure_initialized()
        info = VersionInspector(self.store).inspect(version)
        return CommandResult(info.format(), version=info.version)

    def get_status(self) -> GvtStatus:
        """Get latest/active pointers and the active version's files."""
        self.ensure_initialized()
        active = self.store.read_active()
        return GvtStatus(
            latest=self.store.read_latest(),
            active=active,
            tracked_files=self.store.list_files(active),
        )

    def _builder(self) -> VersionBuilder:
        return VersionBuilder(self.store, self.config.messages)

    @staticmethod
    def _report(result: BuildResult) -> CommandResult:
        template = _SUCCESS_MESSAGES if result.created else _NOOP_MESSAGES
        return CommandResult(
            template[result.operation].format(file=result.file_name),
            version=result.version,
            created=result.created,
        )
