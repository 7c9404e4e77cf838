"""Checkout for gvt.

Moves the working directory to a stored version: files of the active
version are removed, files of the target version are copied in, then the
active pointer moves. Files gvt never tracked in the active version are
left alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import IOFaultError, InvalidVersionError
from ..utils.fs import copy_file, delete_if_exists
from ..utils.log import log_debug
from .snapshot_store import SnapshotStore


@dataclass
class CheckoutResult:
    """Result of a checkout."""
    version: int
    previous: int
    removed: list[str] = field(default_factory=list)
    restored: list[str] = field(default_factory=list)


class CheckoutEngine:
    """Reconciles the working directory with a version."""

    def __init__(self, store: SnapshotStore):
        self.store = store

    def checkout(self, version: int) -> CheckoutResult:
        """Check out a version into the working directory.

        Args:
            version: Target version id

        Returns:
            CheckoutResult listing removed and restored files

        Raises:
            InvalidVersionError: If version is outside [0, latest]
            IOFaultError: If a working-tree file cannot be removed or written.
                The working tree may then hold a mix of both versions.
        """
        latest = self.store.read_latest()
        if version < 0 or version > latest:
            raise InvalidVersionError(version)

        previous = self.store.read_active()
        result = CheckoutResult(version=version, previous=previous)
        root = self.store.project_root

        try:
            for name in self.store.list_files(previous):
                if delete_if_exists(root / name):
                    result.removed.append(name)

            for name in self.store.list_files(version):
                copy_file(self.store.file_path(version, name), root / name)
                result.restored.append(name)

            self.store.write_active(version)
        except OSError as e:
            raise IOFaultError("checkout", "Underlying system problem. See ERR for details.") from e

        log_debug(
            f"checkout {previous} -> {version}: removed {result.removed}, restored {result.restored}"
        )
        return result
