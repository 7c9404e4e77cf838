from __future__ import annotations

from pathlib import Path

import pytest

from gvt.core.history import HistoryWalker, VersionInspector, format_history
from gvt.core.snapshot_store import SnapshotStore
from gvt.core.version_builder import VersionBuilder
from gvt.errors import CorruptStateError, InvalidVersionError


def _repo_with_versions(project: Path, commits: int) -> SnapshotStore:
    store = SnapshotStore(project)
    store.initialize()
    builder = VersionBuilder(store)
    (project / "foo.txt").write_text("0")
    builder.add("foo.txt")
    for i in range(1, commits + 1):
        (project / "foo.txt").write_text(str(i))
        builder.commit("foo.txt", f"change {i}")
    return store


def test_walk_is_newest_first(project: Path):
    store = _repo_with_versions(project, 2)

    entries = list(HistoryWalker(store).walk())

    assert [e.version for e in entries] == [3, 2, 1, 0]
    assert entries[0].message == "change 2"
    assert entries[-1].message == "GVT initialized."


@pytest.mark.parametrize("limit,expected", [(1, 1), (2, 2), (4, 4), (10, 4)])
def test_walk_limit(project: Path, limit: int, expected: int):
    store = _repo_with_versions(project, 2)

    entries = list(HistoryWalker(store).walk(limit))

    assert len(entries) == expected
    assert entries[0].version == 3


def test_walk_uses_first_message_line(project: Path):
    store = _repo_with_versions(project, 0)
    store.write_message(1, "summary\nmore detail\n")

    entries = list(HistoryWalker(store).walk(1))

    assert entries[0].message == "summary"


def test_walk_is_restartable(project: Path):
    store = _repo_with_versions(project, 0)
    walker = HistoryWalker(store)
    first = list(walker.walk())

    (project / "foo.txt").write_text("new")
    VersionBuilder(store).commit("foo.txt")

    assert len(list(walker.walk())) == len(first) + 1


def test_format_history(project: Path):
    store = _repo_with_versions(project, 1)

    text = format_history(HistoryWalker(store).walk())

    assert text == (
        "2: change 1\n"
        "1: File added successfully. File: foo.txt\n"
        "0: GVT initialized.\n"
    )


class TestVersionInspector:
    def test_defaults_to_active(self, project: Path):
        store = _repo_with_versions(project, 1)
        store.write_active(1)

        info = VersionInspector(store).inspect()

        assert info.version == 1
        assert info.format() == "Version: 1\nFile added successfully. File: foo.txt"

    def test_explicit_version_keeps_full_message(self, project: Path):
        store = _repo_with_versions(project, 0)
        store.write_message(1, "line one\nline two")

        info = VersionInspector(store).inspect(1)

        assert info.format() == "Version: 1\nline one\nline two"

    @pytest.mark.parametrize("version", [-1, 3])
    def test_out_of_range(self, project: Path, version: int):
        store = _repo_with_versions(project, 1)

        with pytest.raises(InvalidVersionError):
            VersionInspector(store).inspect(version)


def test_message_in_other_encoding_is_corrupt_state(project: Path):
    """Reading messages with an encoding they were not written in reports corrupt state."""
    store = _repo_with_versions(project, 0)
    store.write_message(1, "żółw")

    ascii_store = SnapshotStore(project, encoding="ascii")

    with pytest.raises(CorruptStateError):
        list(HistoryWalker(ascii_store).walk())
    with pytest.raises(CorruptStateError):
        VersionInspector(ascii_store).inspect(1)
