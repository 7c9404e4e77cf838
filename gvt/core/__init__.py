"""Core modules for gvt."""

from .checkout import CheckoutEngine
from .controller import GvtController
from .history import HistoryWalker, VersionInspector
from .snapshot_store import SnapshotStore
from .version_builder import VersionBuilder

__all__ = [
    "CheckoutEngine",
    "GvtController",
    "HistoryWalker",
    "SnapshotStore",
    "VersionBuilder",
    "VersionInspector",
]
