"""Version history and inspection for gvt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from ..errors import InvalidVersionError
from .snapshot_store import SnapshotStore


@dataclass(frozen=True)
class HistoryEntry:
    version: int
    message: str

    def format(self) -> str:
        return f"{self.version}: {self.message}"


@dataclass(frozen=True)
class VersionInfo:
    version: int
    message: str

    def format(self) -> str:
        return f"Version: {self.version}\n{self.message}"


class HistoryWalker:
    """Walks versions from the latest one backward."""

    def __init__(self, store: SnapshotStore):
        self.store = store

    def walk(self, limit: int | None = None) -> Iterator[HistoryEntry]:
        """Yield entries newest first, at most `limit` of them.

        The latest pointer is read when iteration starts, so each call
        reflects the repository at that moment. Only the first line of each
        message is used.
        """
        latest = self.store.read_latest()
        remaining = latest + 1 if limit is None else limit

        version = latest
        while version >= 0 and remaining > 0:
            lines = self.store.read_message(version).splitlines()
            yield HistoryEntry(version, lines[0] if lines else "")
            version -= 1
            remaining -= 1


def format_history(entries: Iterator[HistoryEntry]) -> str:
    return "".join(f"{entry.format()}\n" for entry in entries)


class VersionInspector:
    """Looks up a single version's message."""

    def __init__(self, store: SnapshotStore):
        self.store = store

    def inspect(self, version: int | None = None) -> VersionInfo:
        """Return a version's full message; defaults to the active version.

        Raises:
            InvalidVersionError: If version is outside [0, latest]
        """
        if version is None:
            version = self.store.read_active()

        if version < 0 or version > self.store.read_latest():
            raise InvalidVersionError(version)

        return VersionInfo(version, self.store.read_message(version))
